"""Staging area operations."""

from ..protocols.command_runner_protocol import CommandRunnerProtocol
from .repository_state import RepositoryState


class StagingController:
    def __init__(self, runner: CommandRunnerProtocol, state: RepositoryState):
        self.runner = runner
        self.state = state

    def reset_stage(self) -> None:
        """
        Make sure nothing is staged before a new commit is composed, so that
        unrelated leftovers never end up in it.

        Only the index is reset. Files in the working tree are not touched.
        """
        if self.state.has_staged_changes():
            self.runner.execute(["reset", "-q", "--mixed"])

    def stage_add(self, path: str) -> None:
        self.runner.execute(["add", "--", path])

    def stage_remove(self, path: str) -> None:
        # The file store has already deleted or moved the file on disk.
        self.runner.execute(["rm", "--cached", "-q", "--", path])
