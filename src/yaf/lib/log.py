"""
Centralized logging using Loguru with context-aware verbosity.

This module provides a LOG() function that respects the current ProgramState's
verbosity level without requiring explicit state passing.

Features:
- Context-aware logging tied to ProgramState verbosity
- Compact stderr format, so stdout stays clean for rendered output
- Warnings and errors always pass through `logger` directly

Usage:
    from yaf.lib.log import LOG, logger, state_connectToLogger

    # At start of the pipeline:
    state_connectToLogger(state)

    # Anywhere in that context:
    LOG("Debug details appear if verbosity >= 2", level=2)
    LOG("Verbose trace appears if verbosity >= 3", level=3)
    logger.warning("Always shown at the default sink level")
"""

from loguru import logger
from typing import Any, Optional
from contextvars import ContextVar
import sys

from ..config import appsettings

# Context variable to hold current ProgramState
_program_state: ContextVar[Optional[Any]] = ContextVar('program_state', default=None)

# Configure loguru with yaf-specific format
logger_format = (
    "<green>{time:HH:mm:ss}</green> │ "
    "<level>{level: <7}</level> │ "
    "<level>{message}</level>"
)


def _stderr_write(message: str) -> None:
    # sys.stderr is looked up per message, so a replaced stream is honoured
    sys.stderr.write(message)


def sink_configure(level: str) -> None:
    """
    (Re)install the single stderr sink at the given minimum level.

    Args:
        level: Loguru level name ("DEBUG", "WARNING", ...)
    """
    logger.remove()
    logger.add(
        _stderr_write,
        format=logger_format,
        level=level.upper(),
        colorize=sys.stderr.isatty(),
    )


sink_configure(appsettings.log_level)


def state_connectToLogger(state: Any) -> None:
    """
    Connect a ProgramState to the logging context.

    Makes the state's verbosity available to LOG() calls throughout the
    current context. A verbosity above 1 also lowers the sink to DEBUG so
    those calls become visible.

    Args:
        state: ProgramState instance with verbosity attribute
    """
    _program_state.set(state)
    if getattr(state, 'verbosity', 1) >= 2:
        sink_configure("DEBUG")


def LOG(message: str, level: int = 1, **kwargs: Any) -> None:
    """
    Log message if current state's verbosity allows.

    Args:
        message: Log message to display
        level: Minimum verbosity level required (1=normal, 2=verbose, 3=debug)
        **kwargs: Additional loguru metadata

    Verbosity levels:
        1 = Normal output (default)
        2 = Verbose (-v)
        3 = Debug (-vv or higher)

    Example:
        LOG("Read 312 characters from yaf.conf", level=2)
        LOG("Directive @ 3:5: envvar '$USER'", level=3)
    """
    state = _program_state.get()

    if state and hasattr(state, 'verbosity') and state.verbosity >= level:
        logger.debug(message, **kwargs)
