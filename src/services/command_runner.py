"""Runs git subcommands through GitPython."""

from pathlib import Path
from typing import List, Sequence, Union

from git import Git
from git.exc import GitCommandNotFound

from ..models import CommandError, ConfigurationError


class GitCommandRunner:
    """Invokes the git executable synchronously inside one working tree."""

    def __init__(self, working_dir: Union[str, Path], git_executable: str = "git"):
        self._working_dir = Path(working_dir)
        self.git_executable = git_executable
        self._git = Git(str(self._working_dir))

    @property
    def working_dir(self) -> Path:
        return self._working_dir

    def execute(self, argv: Sequence[str]) -> List[str]:
        """
        Run ``git <argv>`` and return its output lines (stdout, then stderr).

        Raises:
            CommandError: if git exits with a non-zero status.
            ConfigurationError: if the git executable cannot be found.
        """
        command = [self.git_executable, *argv]
        try:
            status, stdout, stderr = self._git.execute(
                command,
                with_extended_output=True,
                with_exceptions=False,
            )
        except GitCommandNotFound as e:
            raise ConfigurationError(
                f"Git executable '{self.git_executable}' could not be run: {e}"
            ) from e

        output = stdout.splitlines() + stderr.splitlines()
        if status != 0:
            raise CommandError(command, status, output)
        return output
