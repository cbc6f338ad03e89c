r"""
Parser for yaf {directive} templates

Transforms template text into a flat, ordered list of segments.

The parser is a single left-to-right scan with two modes:
1. Literal mode: characters accumulate into a Literal segment
2. Capture mode: entered on '{', characters accumulate into the raw text
   of a Directive until the matching '}'

Escapes:
- \{  \}  \\  produce a literal '{', '}' or '\' in either mode
- any other backslash is kept as-is

Example:
    >>> Parser("{@bold}Hi {$USER}!").parse()
    [Directive(kind=<DirectiveKind.STYLE: 'style'>, raw='@bold', line=1, column=1),
     Literal(text='Hi '),
     Directive(kind=<DirectiveKind.ENVVAR: 'envvar'>, raw='$USER', line=1, column=10),
     Literal(text='!')]
"""

from typing import List, NoReturn, Optional

from ..models.segments import Directive, Literal, Segments, kind_classify
from .errors import UnexpectedBrace, UnterminatedDirective
from .log import LOG


ESCAPABLE = frozenset('{}\\')


class Parser:
    """
    Parser for yaf template syntax

    Handles:
    - Literal text runs (including newlines)
    - {command}, {$ENV} and {@style} directives
    - Backslash escaping of braces and backslashes
    - Error reporting with line and column numbers
    """

    def __init__(self, source: str, debug: bool = False):
        """
        Initialize parser with template text

        Args:
            source: Raw template text (yaf.conf contents)
            debug: Emit a trace line per segment produced

        Attributes:
            source: Template text being parsed
            position: Current character index in source
            line_number: Current 1-based line
            column: Current 1-based column
            segments: Segments produced so far
        """
        self.source = source
        self.debug = debug
        self.position = 0
        self.line_number = 1
        self.column = 1
        self.segments: Segments = []
        self.buffer: List[str] = []

    def parse(self) -> Segments:
        """
        Parse template text into segments

        Returns:
            List of Literal and Directive segments in source order.
            Returns an empty list for empty source.

        Raises:
            UnterminatedDirective: If input ends inside a directive
            UnexpectedBrace: On '{' inside a directive or a stray '}'
        """
        self.position = 0
        self.line_number = 1
        self.column = 1
        self.segments = []
        self.buffer = []

        # Start of the open directive, or None in literal mode
        opened_at: Optional[tuple] = None

        while self.position < len(self.source):
            char = self.source[self.position]

            if char == '\\':
                escaped = self.escape_read()
                self.buffer.append(escaped)
                continue

            if char == '{':
                if opened_at is not None:
                    self.error(UnexpectedBrace, '{' + ''.join(self.buffer) + '{')
                self.literal_flush()
                opened_at = (self.line_number, self.column)
            elif char == '}':
                if opened_at is None:
                    self.error(UnexpectedBrace, '}')
                self.directive_close(*opened_at)
                opened_at = None
            else:
                self.buffer.append(char)

            self.advance()

        if opened_at is not None:
            line, column = opened_at
            raise UnterminatedDirective(line, column, '{' + ''.join(self.buffer))

        self.literal_flush()
        return self.segments

    def escape_read(self) -> str:
        r"""
        Consume a backslash and return the text it stands for

        '\{', '\}' and '\\' consume two characters and yield the second.
        Any other backslash (including one at end of input) consumes only
        itself and yields a literal backslash.
        """
        following = self.source[self.position + 1:self.position + 2]
        self.advance()
        if following and following in ESCAPABLE:
            self.advance()
            return following
        return '\\'

    def advance(self) -> None:
        """Move past the current character, tracking line and column"""
        if self.source[self.position] == '\n':
            self.line_number += 1
            self.column = 1
        else:
            self.column += 1
        self.position += 1

    def literal_flush(self) -> None:
        """Emit the accumulated buffer as a Literal, if non-empty"""
        if self.buffer:
            segment = Literal(''.join(self.buffer))
            self.segments.append(segment)
            if self.debug:
                LOG(f"Literal: {segment.text!r}", level=3)
        self.buffer = []

    def directive_close(self, line: int, column: int) -> None:
        """Emit the accumulated buffer as a Directive opened at line:column"""
        raw = ''.join(self.buffer)
        segment = Directive(kind=kind_classify(raw), raw=raw, line=line, column=column)
        self.segments.append(segment)
        if self.debug:
            LOG(f"Directive @ {line}:{column}: {segment.kind.value} {raw!r}", level=3)
        self.buffer = []

    def error(self, error_class: type, text: str) -> NoReturn:
        """
        Raise a parse error located at the current position

        Args:
            error_class: TemplateSyntaxError subclass to raise
            text: Offending text for the message

        Raises:
            TemplateSyntaxError: Always
        """
        raise error_class(self.line_number, self.column, text)


def parse(source: str) -> Segments:
    """Parse template text into segments"""
    return Parser(source).parse()
