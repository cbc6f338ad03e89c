"""
Basic parser tests - simplest cases

Tests empty source, plain text, single directives and sigil classification.
"""

import pytest

from yaf.lib.parser import Parser, parse
from yaf.models.segments import Directive, DirectiveKind, Literal


class TestEmptyAndSimple:
    """Test empty source and plain text"""

    def test_empty_source(self):
        """Empty string should parse to empty list"""
        parser = Parser("")
        assert parser.parse() == []

    def test_plain_text(self):
        """Text without directives is a single literal"""
        assert parse("abc") == [Literal("abc")]

    def test_multiline_text_kept_whole(self):
        """Newlines are ordinary literal characters"""
        assert parse("line 1\nline 2\n") == [Literal("line 1\nline 2\n")]

    def test_whitespace_preserved(self):
        """Leading and trailing whitespace is not stripped"""
        assert parse("  \t x \n") == [Literal("  \t x \n")]

    def test_parse_twice_same_result(self):
        """Parser can be re-run and produces the same segments"""
        parser = Parser("a{b}c")
        assert parser.parse() == parser.parse()


class TestSingleDirective:
    """Test a single directive of each kind"""

    def test_command_directive(self):
        """No sigil means a command line"""
        segments = parse("{uname -r}")

        assert len(segments) == 1
        directive = segments[0]
        assert isinstance(directive, Directive)
        assert directive.kind is DirectiveKind.COMMAND
        assert directive.raw == "uname -r"
        assert directive.body == "uname -r"

    def test_envvar_directive(self):
        """'$' sigil selects an environment variable"""
        directive = parse("{$HOME}")[0]

        assert directive.kind is DirectiveKind.ENVVAR
        assert directive.raw == "$HOME"
        assert directive.body == "HOME"

    def test_style_directive(self):
        """'@' sigil selects a style"""
        directive = parse("{@bold}")[0]

        assert directive.kind is DirectiveKind.STYLE
        assert directive.raw == "@bold"
        assert directive.body == "bold"

    def test_empty_directive_is_command(self):
        """'{}' is an empty command"""
        directive = parse("{}")[0]

        assert directive.kind is DirectiveKind.COMMAND
        assert directive.raw == ""

    def test_sigil_only_in_first_position(self):
        """A sigil later in the body does not change the kind"""
        directive = parse("{echo $HOME}")[0]

        assert directive.kind is DirectiveKind.COMMAND
        assert directive.raw == "echo $HOME"

    def test_leading_space_is_command(self):
        """Whitespace before a sigil makes it a command"""
        directive = parse("{ $HOME}")[0]

        assert directive.kind is DirectiveKind.COMMAND
        assert directive.raw == " $HOME"


class TestSegmentOrder:
    """Test that segments keep source order"""

    def test_mixed_kinds(self):
        """Literals and directives interleave in source order"""
        segments = parse("{@bold}Hi {$USER}!")

        assert [type(s) for s in segments] == [Directive, Literal, Directive, Literal]
        assert segments[0].raw == "@bold"
        assert segments[1] == Literal("Hi ")
        assert segments[2].raw == "$USER"
        assert segments[3] == Literal("!")

    def test_adjacent_directives(self):
        """No empty literal between adjacent directives"""
        segments = parse("{@bold}{@color1}{date}")

        assert len(segments) == 3
        assert all(isinstance(s, Directive) for s in segments)

    @pytest.mark.parametrize("source,count", [
        ("", 0),
        ("text", 0),
        ("{a}", 1),
        ("x{a}y{b}z", 2),
        ("{$A}{@bold}{c}\n{d}", 4),
        (r"\{not\} {a}", 1),
    ])
    def test_directive_count(self, source, count):
        """Directive count equals the number of unescaped brace pairs"""
        directives = [s for s in parse(source) if isinstance(s, Directive)]
        assert len(directives) == count


class TestLocations:
    """Test line and column tracking"""

    def test_first_position(self):
        directive = parse("{a}")[0]
        assert (directive.line, directive.column) == (1, 1)

    def test_column_on_first_line(self):
        directive = parse("ab {c}")[1]
        assert (directive.line, directive.column) == (1, 4)

    def test_later_line(self):
        """Columns restart after each newline"""
        segments = parse("one\ntwo {x}\n  {y}")
        directives = [s for s in segments if isinstance(s, Directive)]

        assert (directives[0].line, directives[0].column) == (2, 5)
        assert (directives[1].line, directives[1].column) == (3, 3)
