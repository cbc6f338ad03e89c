"""
yaf template engine

Parser, renderer, style table and logging helpers.
"""

__version__ = "0.3.0"

from .log import LOG, logger, state_connectToLogger
from .parser import Parser, parse
from .renderer import Renderer, ShellExecutor, render_template
from .styles import FieldRegistry, STYLES

__all__ = [
    "Parser",
    "parse",
    "Renderer",
    "ShellExecutor",
    "render_template",
    "FieldRegistry",
    "STYLES",
    "LOG",
    "logger",
    "state_connectToLogger",
    "__version__",
]
