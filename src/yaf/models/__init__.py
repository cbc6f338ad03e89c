"""
Models package for yaf

Contains data structures and type definitions for parsing and rendering.
"""

from .state import ProgramState, pipeline
from .segments import Directive, DirectiveKind, Literal, Segment, Segments, kind_classify
from .execution import CommandExecutor, CommandResult, EnvLookup

__all__ = [
    "ProgramState",
    "pipeline",
    "Directive",
    "DirectiveKind",
    "Literal",
    "Segment",
    "Segments",
    "kind_classify",
    "CommandExecutor",
    "CommandResult",
    "EnvLookup",
]
