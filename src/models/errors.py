"""Exception hierarchy for the asset committer."""

from typing import List, Sequence, Union


class AssetCommitterError(Exception):
    """Base class for all asset committer failures."""


class ConfigurationError(AssetCommitterError):
    """Invalid repository path, missing .git directory or bad settings."""


class InvalidArgumentError(AssetCommitterError):
    """A file identity value that cannot be turned into a file path."""


class NothingToCommitError(AssetCommitterError):
    """Staging produced no changes, so there is nothing to commit."""


class CommandError(AssetCommitterError):
    """A git invocation exited with a status the caller does not interpret."""

    def __init__(
        self,
        command: Sequence[str],
        exit_code: int,
        output: Union[Sequence[str], str] = (),
    ):
        self.command = list(command)
        self.exit_code = exit_code
        if isinstance(output, str):
            output = output.splitlines()
        self.output: List[str] = list(output)

        message = f"Command '{' '.join(self.command)}' failed (exit-code {exit_code})."
        if self.output:
            message += "\nCommand output:\n" + "\n".join(self.output)
        super().__init__(message)

    @property
    def combined_output(self) -> str:
        return "\n".join(self.output)
