"""Command runner protocol interface."""

from pathlib import Path
from typing import List, Protocol, Sequence, runtime_checkable


@runtime_checkable
class CommandRunnerProtocol(Protocol):
    """Protocol for running git subcommands inside one working tree."""

    @property
    def working_dir(self) -> Path:
        """Directory the commands are run in."""
        ...

    def execute(self, argv: Sequence[str]) -> List[str]:
        """Run a git subcommand. Returns stdout+stderr lines, raises CommandError on non-zero exit."""
        ...
