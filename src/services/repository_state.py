"""Read-only queries against the git working tree and index."""

from typing import List

from ..models import CommandError
from ..protocols.command_runner_protocol import CommandRunnerProtocol


class RepositoryState:
    """Answers the questions the reconciliation engine asks about a path."""

    def __init__(self, runner: CommandRunnerProtocol):
        self.runner = runner

    def _succeeds(self, argv: List[str]) -> bool:
        # Exit code 1 is git's "no match" answer for these lookups.
        try:
            self.runner.execute(argv)
        except CommandError as e:
            if e.exit_code == 1:
                return False
            raise
        return True

    def is_ignored(self, path: str, consult_index: bool = True) -> bool:
        """
        Whether ``path`` matches an ignore rule.

        With ``consult_index`` (git's normal behaviour) files that are already
        tracked are never reported as ignored. Pass False to check only the
        ignore files, which helps when debugging them.
        """
        argv = ["check-ignore", "-q"]
        if not consult_index:
            argv.append("--no-index")
        argv.extend(["--", path])
        return self._succeeds(argv)

    def is_tracked(self, path: str) -> bool:
        """Whether ``path`` is committed or staged in the index."""
        return self._succeeds(["ls-files", "--error-unmatch", "--", path])

    def is_modified(self, path: str) -> bool:
        """Whether the tracked file ``path`` differs from the index."""
        return self._succeeds(["ls-files", "-m", "--error-unmatch", "--", path])

    def has_staged_changes(self) -> bool:
        """True iff the index differs from the last commit."""
        return not self._succeeds(["diff", "--cached", "--quiet"])
