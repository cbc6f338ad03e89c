#!/usr/bin/env python3
"""
yaf - Yet Another Fetch

A terminal system-info display driven by a small template language.

Philosophy:
    - Template-first: the whole display is one plain text file
    - Three substitutions: {command}, {$ENV_VAR}, {@style}
    - Built-in fields for common facts: {@username}, {@hostname}, {@distro},
      {@kernel}, {@uptime}, {@pkgs}
    - Escapes: \\{  \\}  \\\\ for literal braces and backslashes

Usage:
    yaf [CONFIG_PATH]

    CONFIG_PATH defaults to $XDG_CONFIG_HOME/yaf.conf. The built-in
    template is used when the file cannot be read.

Examples:
    # Render the default config
    yaf

    # Start a custom config from the built-in one
    yaf --dump-config > ~/.config/yaf.conf

    # Trace every directive
    yaf -vv
"""

import sys
from argparse import ArgumentParser, Namespace
from importlib import resources
from pathlib import Path
from typing import List, Optional

from pygments import highlight
from pygments.formatters import TerminalFormatter

from .config import appsettings
from .lib import Parser, Renderer, __version__, LOG, logger, state_connectToLogger
from .lib.errors import RenderError, TemplateSyntaxError
from .lib.lexer import get_lexer
from .lib.styles import RESET
from .models import ProgramState, pipeline


# Define CLI arguments
parser = ArgumentParser(
    prog="yaf",
    description="yaf - Yet Another Fetch",
)

parser.add_argument(
    "config_path",
    nargs="?",
    default=None,
    help="Config path, defaults to ~/.config/yaf.conf; "
         "uses the builtin config if the file does not exist",
)

parser.add_argument(
    "-d",
    "--dump-config",
    dest="dump_config",
    action="store_true",
    help="Dump the builtin config to stdout",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase log verbosity (can be repeated: -v, -vv)",
)

parser.add_argument("-V", "--version", action="store_true", help="Print version info")


def builtinConfig_read() -> str:
    """Text of the template shipped inside the package"""
    return resources.files("yaf").joinpath("yaf.conf").read_text(encoding="utf-8")


def termStyles_reset() -> None:
    """Leave the terminal in its default style"""
    if appsettings.reset_on_exit:
        sys.stdout.write(RESET)
    sys.stdout.flush()


def config_load(inputstate: ProgramState) -> ProgramState:
    """
    Read the template file, falling back to the built-in template.

    Args:
        inputstate: Program state with config_path (or None for the default)

    Returns:
        ProgramState with added fields:
            - template: Raw template text
            - usedBuiltin: True if the built-in template was used
    """
    state = inputstate.copy()

    config_path = Path(state.config_path or appsettings.config_path).expanduser()
    LOG(f"Config path: {config_path}", level=2)

    try:
        state.template = config_path.read_text(encoding="utf-8")
        LOG(f"Read {len(state.template)} characters from {config_path}", level=2)
    except (OSError, UnicodeDecodeError) as e:
        LOG(f"Cannot read {config_path}: {e}", level=2)
        logger.warning("Using builtin config.")
        state.template = builtinConfig_read()
        state.usedBuiltin = True

    return state


def template_parse(inputstate: ProgramState) -> ProgramState:
    """
    Parse the template into segments.

    Returns:
        ProgramState with added field:
            - segments: List of Literal / Directive segments

    Exits:
        1 if the template has a syntax error
    """
    state = inputstate.copy()

    try:
        template_parser = Parser(state.template, debug=(state.verbosity >= 3))
        state.segments = template_parser.parse()
        LOG(f"Parsed {len(state.segments)} segments", level=2)
    except TemplateSyntaxError as e:
        termStyles_reset()
        logger.error(f"Parse error: {e}")
        sys.exit(1)

    return state


def template_render(inputstate: ProgramState) -> ProgramState:
    """
    Resolve every segment to text.

    Returns:
        ProgramState with added field:
            - rendered: Display string with inline ANSI styles

    Exits:
        1 if a directive cannot be rendered (e.g. an unknown style)
    """
    state = inputstate.copy()

    if state.segments is None:
        logger.error("No parsed template available")
        sys.exit(1)

    try:
        state.rendered = Renderer().render(state.segments)
    except RenderError as e:
        termStyles_reset()
        logger.error(f"Render error: {e}")
        sys.exit(1)

    return state


def output_write(inputstate: ProgramState) -> ProgramState:
    """
    Write the rendered display to stdout and reset terminal styles.

    Returns:
        ProgramState unchanged (terminal pipeline stage)
    """
    state = inputstate.copy()
    source = "builtin config" if state.usedBuiltin else state.config_path or appsettings.config_path
    LOG(f"Writing {len(state.rendered or '')} characters rendered from {source}", level=2)
    sys.stdout.write(state.rendered or "")
    termStyles_reset()
    return state


def config_dump() -> None:
    """Print the built-in template, highlighted when writing to a terminal"""
    template = builtinConfig_read()
    if appsettings.highlight_dump and sys.stdout.isatty():
        template = highlight(template, get_lexer(), TerminalFormatter())
    sys.stdout.write(template)


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - render the fetch template to stdout.

    Orchestrates the pipeline:
        1. config_load: Read the template or fall back to the built-in one
        2. template_parse: Parse it into segments
        3. template_render: Resolve directives
        4. output_write: Print the result

    Args:
        argv: Command line arguments (default: sys.argv[1:])
    """
    options: Namespace = parser.parse_args(argv)

    if options.dump_config:
        config_dump()
        return

    if options.version:
        sys.stdout.write(f"yaf {__version__}\n")
        return

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, config_load, template_parse, template_render, output_write)


if __name__ == "__main__":
    main()
