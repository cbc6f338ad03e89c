"""
Exception hierarchy for yaf

Parse errors and style errors are fatal and surface to the CLI, which
reports them and exits non-zero. Command failures and unset environment
variables never raise; the renderer degrades them to empty text.
"""

from typing import Optional


class YafError(Exception):
    """Base class for all yaf errors"""
    pass


class TemplateSyntaxError(YafError):
    """
    Raised when a template cannot be parsed

    Attributes:
        line: 1-based line of the offending brace
        column: 1-based column of the offending brace
        text: Source text around the error (the directive captured so far)
    """

    reason = "Syntax error"

    def __init__(self, line: int, column: int, text: str = "") -> None:
        self.line = line
        self.column = column
        self.text = text
        super().__init__(self.message_build())

    def message_build(self) -> str:
        return f"{self.reason} {self.text!r} at line {self.line}, column {self.column}"


class UnterminatedDirective(TemplateSyntaxError):
    """A '{' was opened but input ended before its closing '}'"""

    reason = "Unterminated directive"


class UnexpectedBrace(TemplateSyntaxError):
    """An unescaped '{' inside a directive, or a stray '}' outside one"""

    reason = "Unexpected curly brace"


class RenderError(YafError):
    """Base class for errors raised while rendering segments"""
    pass


class UnknownStyle(RenderError):
    """
    Raised when a '@' directive names neither a style nor a built-in field

    Attributes:
        name: The unrecognized name (sigil removed)
        line: Line of the directive, if known
        column: Column of the directive, if known
    """

    def __init__(self, name: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.name = name
        self.line = line
        self.column = column
        where = f" at line {line}, column {column}" if line is not None else ""
        super().__init__(f"Unknown style '{{@{name}}}'{where}")
