"""
Renderer for parsed yaf templates

Resolves each segment to text and concatenates the results in source
order:
- Literal: copied unchanged
- {command}: run through the shell, stdout with one trailing newline
  stripped; any failure yields ""
- {$NAME}: environment value, "" when unset
- {@name}: ANSI style sequence or built-in field value; anything else
  raises UnknownStyle

Commands run one at a time in template order, so their side effects are
ordered the same way as the directives.
"""

import os
import subprocess
from typing import Callable, Dict, List, Optional

from ..config import appsettings
from ..models.execution import CommandExecutor, CommandResult, EnvLookup
from ..models.segments import Directive, DirectiveKind, Literal, Segments
from .errors import UnknownStyle
from .log import LOG, logger
from .parser import Parser
from .styles import FieldRegistry, style_get


class ShellExecutor:
    """
    Runs command lines with `<shell> -c <command>`

    Standard error is inherited from yaf itself; standard output is
    captured. Standard input is /dev/null, so a command reading it sees
    end-of-file immediately.
    """

    def __init__(self, shell: Optional[str] = None) -> None:
        self.shell = shell or appsettings.shell

    def execute(self, command: str) -> CommandResult:
        result = subprocess.run(
            [self.shell, "-c", command],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            check=False,
        )
        return CommandResult(stdout=result.stdout, returncode=result.returncode)


def line_terminatorStrip(text: str) -> str:
    """Remove a single trailing '\\n' or '\\r\\n', if present"""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class Renderer:
    """
    Renders segments to a display string

    Responsibilities:
    - Dispatch each directive on its kind
    - Run commands through the injected executor
    - Read environment variables through the injected lookup
    - Resolve styles and built-in fields
    """

    def __init__(
        self,
        executor: Optional[CommandExecutor] = None,
        env_lookup: Optional[EnvLookup] = None,
        fields: Optional[FieldRegistry] = None,
    ) -> None:
        """
        Initialize renderer

        Args:
            executor: Command runner (default: ShellExecutor)
            env_lookup: Environment reader (default: os.environ.get)
            fields: Built-in field registry (default: FieldRegistry())
        """
        self.executor = executor if executor is not None else ShellExecutor()
        self.env_lookup = env_lookup if env_lookup is not None else os.environ.get
        self.fields = fields if fields is not None else FieldRegistry()
        self.resolvers: Dict[DirectiveKind, Callable[[Directive], str]] = {
            DirectiveKind.COMMAND: self.command_resolve,
            DirectiveKind.ENVVAR: self.envvar_resolve,
            DirectiveKind.STYLE: self.style_resolve,
        }

    def render(self, segments: Segments) -> str:
        """
        Render segments to a single string

        Raises:
            UnknownStyle: On a {@name} that is neither a style nor a field.
                          Nothing is returned in that case.
        """
        parts: List[str] = []

        for segment in segments:
            if isinstance(segment, Literal):
                parts.append(segment.text)
            else:
                parts.append(self.resolvers[segment.kind](segment))

        return "".join(parts)

    def command_resolve(self, directive: Directive) -> str:
        command = directive.body
        if not command.strip():
            return ""

        LOG(f"Running: {command}", level=2)
        try:
            result = self.executor.execute(command)
        except (OSError, ValueError) as e:
            # ValueError: arguments subprocess refuses, e.g. an embedded NUL
            logger.debug(f"Failed to execute command {command!r}: {e}")
            return ""

        if result.returncode != 0:
            logger.debug(f"Command {command!r} exited with status {result.returncode}")
            return ""

        try:
            output = result.stdout.decode("utf-8")
        except UnicodeDecodeError:
            logger.debug(f"Command {command!r} produced non UTF-8 output")
            return ""

        return line_terminatorStrip(output)

    def envvar_resolve(self, directive: Directive) -> str:
        value = self.env_lookup(directive.body)
        if value is None:
            LOG(f"Environment variable not set: {directive.body}", level=2)
            return ""
        return value

    def style_resolve(self, directive: Directive) -> str:
        name = directive.body
        style = style_get(name)
        if style is not None:
            return style

        provider = self.fields.get(name)
        if provider is not None:
            return provider()

        raise UnknownStyle(name, directive.line, directive.column)


def render_template(source: str, renderer: Optional[Renderer] = None) -> str:
    """
    Parse and render template text in one step

    Raises:
        TemplateSyntaxError: If the template does not parse
        UnknownStyle: If it names an unknown style
    """
    segments = Parser(source).parse()
    return (renderer or Renderer()).render(segments)
