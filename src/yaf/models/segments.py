"""
Segment data models

Type-safe structures produced by the template parser and consumed by the
renderer. A parsed template is a flat list of segments in source order;
there is no nesting.
"""

from enum import Enum
from dataclasses import dataclass
from typing import Dict, List, Union


class DirectiveKind(Enum):
    """
    Kind of a {...} directive, selected by its leading sigil

    The kind is fixed once at parse time; the renderer dispatches on it.
    """
    COMMAND = "command"    # {uname -r}
    ENVVAR = "envvar"      # {$USER}
    STYLE = "style"        # {@bold}


SIGILS: Dict[str, DirectiveKind] = {
    '$': DirectiveKind.ENVVAR,
    '@': DirectiveKind.STYLE,
}


def kind_classify(raw: str) -> DirectiveKind:
    """Classify raw directive text by its first character"""
    return SIGILS.get(raw[:1], DirectiveKind.COMMAND)


@dataclass(frozen=True)
class Literal:
    """
    Plain text copied to the output unchanged

    Attributes:
        text: Text with escape sequences already resolved

    Example:
        Source "Hi \\{there\\}" parses to Literal(text="Hi {there}")
    """
    text: str


@dataclass(frozen=True)
class Directive:
    """
    A {...} span to be replaced with computed text

    Attributes:
        kind: Directive kind derived from the sigil
        raw: Captured text between the braces, escapes resolved, sigil kept
        line: 1-based line of the opening brace
        column: 1-based column of the opening brace

    Example:
        Source "{$HOME}" at the start of a file:
        Directive(kind=DirectiveKind.ENVVAR, raw="$HOME", line=1, column=1)
    """
    kind: DirectiveKind
    raw: str
    line: int = 1
    column: int = 1

    @property
    def body(self) -> str:
        """Raw text without the sigil; commands have no sigil to strip"""
        if self.kind is DirectiveKind.COMMAND:
            return self.raw
        return self.raw[1:]


Segment = Union[Literal, Directive]
Segments = List[Segment]
