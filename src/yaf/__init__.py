"""
yaf - Yet Another Fetch

A template-driven system information display for the terminal.
"""

__version__ = "0.3.0"

from .lib import Parser, Renderer, FieldRegistry, LOG, state_connectToLogger, parse, render_template

__all__ = [
    "Parser",
    "Renderer",
    "FieldRegistry",
    "LOG",
    "state_connectToLogger",
    "parse",
    "render_template",
    "__version__",
]
