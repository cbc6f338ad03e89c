"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the fetch pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the run progresses.

    Pipeline stages and their state additions:
        - Initial: config_path, verbosity
        - config_load: template, usedBuiltin
        - template_parse: segments
        - template_render: rendered
        - output_write: (no additions, terminal stage)

    Attributes:
        config_path: Template file to read (None means the settings default)
        verbosity: Logging verbosity level (1-3)
        template: Raw template text
        usedBuiltin: True when the built-in template replaced a missing file
        segments: Parsed segments
        rendered: Final display string
    """

    # CLI arguments
    config_path: Optional[str] = field(default=None)
    verbosity: int = field(default=1)

    # Pipeline state
    template: str = field(default="")
    usedBuiltin: bool = field(default=False)
    segments: Optional[List[Any]] = field(default=None)  # List[Segment] at runtime
    rendered: Optional[str] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace
    ) -> "ProgramState":
        """
        Create ProgramState from an argparse Namespace.

        Options without a matching ProgramState field are ignored.

        Args:
            options: Parsed CLI arguments

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        filtered_options = {k: v for k, v in vars(options).items() if k in valid_fields}
        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            config_load,
            template_parse,
            template_render,
            output_write
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
