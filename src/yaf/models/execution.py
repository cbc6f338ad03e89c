"""
Command execution models

The renderer runs {command} directives through a CommandExecutor, so
tests can substitute a deterministic fake for the real shell.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of running one command line

    Attributes:
        stdout: Captured standard output, undecoded
        returncode: Process exit status (0 on success)
    """
    stdout: bytes
    returncode: int


class CommandExecutor(Protocol):
    """Anything that can run a shell command line and capture its output"""

    def execute(self, command: str) -> CommandResult:
        """
        Run command and wait for it to finish

        Raises:
            OSError: If the process cannot be started
            ValueError: If the command line cannot be passed to a process
        """
        ...


# Environment lookup capability: name -> value, or None when unset
EnvLookup = Callable[[str], Optional[str]]
