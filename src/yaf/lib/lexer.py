"""
Custom Pygments lexer for yaf template syntax

Provides syntax highlighting for yaf.conf templates, used when dumping
the built-in config to a terminal.

Token types:
- Punctuation: Directive braces
- Operator: Sigils ($ and @)
- Name.Variable: Environment variable names
- Keyword: Style and field names
- String.Backtick: Command lines
- String.Escape: \\{ \\} \\\\ escapes
- Error: Stray or nested braces
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import Text, Punctuation, Operator, Name, Keyword, String, Error


def _directive_body(token):
    """Rules shared by the inside of every directive kind"""
    return [
        (r'\\[{}\\]', String.Escape),
        (r'\}', Punctuation, '#pop'),
        (r'\{', Error),
        (r'[^\\{}]+', token),
        (r'\\', token),
    ]


class YafLexer(RegexLexer):
    """
    Lexer for yaf templates

    Example:
        {@bold}{$USER}{@reset}@{hostname}

    Tokens:
        { → Punctuation
        @ → Operator
        bold → Keyword
        USER → Name.Variable
        hostname → String.Backtick
    """

    name = 'yaf'
    aliases = ['yaf']
    filenames = ['yaf.conf', '*.yaf']

    tokens = {
        'root': [
            (r'\\[{}\\]', String.Escape),
            (r'(\{)(\$)', bygroups(Punctuation, Operator), 'envvar'),
            (r'(\{)(@)', bygroups(Punctuation, Operator), 'style'),
            (r'\{', Punctuation, 'command'),
            (r'\}', Error),
            (r'[^\\{}]+', Text),
            (r'\\', Text),
        ],
        'envvar': _directive_body(Name.Variable),
        'style': _directive_body(Keyword),
        'command': _directive_body(String.Backtick),
    }


def get_lexer() -> YafLexer:
    """
    Get the YafLexer instance

    Returns:
        YafLexer instance ready for use with Pygments
    """
    return YafLexer()
