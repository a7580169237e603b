"""Decides which git operations mirror a file event, and with which message."""

from typing import Mapping, Optional

from ..models import FileIdentity
from ..schemas import CommitterConfig
from .commit_executor import CommitExecutor
from .repository_state import RepositoryState
from .staging_controller import StagingController

COMMIT_MESSAGES = {
    "file_creation": "Create file {filename}.",
    "file_deletion": "Delete file {filename}.",
    "file_renaming": "{verb} file {old_filename} to {new_filename}.",
    "verb_rename": "Rename",
    "verb_move": "Move",
    "new_name_ignored": (
        "The new filename is excluded by ignore rules, so only a deletion is committed."
    ),
    "old_name_ignored": (
        "The previous filename was excluded by ignore rules, "
        "so it appears as a new file in this commit."
    ),
    "old_name_not_committed": (
        "The file was not previously committed in the repository, although it did "
        "exist in the filesystem, so it appears as a new file in this commit."
    ),
}


class ReconciliationEngine:
    """
    Mirrors file creations, deletions and renames onto the git repository,
    one commit per event.

    Each handler starts from an empty stage, so a commit contains exactly the
    paths staged for that event. Handlers return True when a commit was made
    and False when the event was skipped (disabled, ignored or untracked).
    """

    def __init__(
        self,
        state: RepositoryState,
        staging: StagingController,
        executor: CommitExecutor,
        config: CommitterConfig,
        repository_root: str,
        messages: Optional[Mapping[str, str]] = None,
    ):
        self.state = state
        self.staging = staging
        self.executor = executor
        self.config = config
        self.repository_root = repository_root
        self.messages = {**COMMIT_MESSAGES, **(messages or {})}

    def _display(self, file: FileIdentity) -> str:
        return file.relative_to(self.repository_root)

    def _message(self, key: str, **params: str) -> str:
        return self.messages[key].format(**params)

    def handle_create(self, file: FileIdentity) -> bool:
        if not self.config.commit_file_creations:
            return False
        if self.state.is_ignored(file.path):
            return False  # Never force-add ignored files
        self.staging.reset_stage()

        self.staging.stage_add(file.path)
        self.executor.commit(self._message("file_creation", filename=self._display(file)))
        return True

    def handle_delete(self, file: FileIdentity) -> bool:
        if not self.config.commit_file_deletions:
            return False
        if not self.state.is_tracked(file.path):
            return False  # Nothing to remove from history
        self.staging.reset_stage()

        self.staging.stage_remove(file.path)
        self.executor.commit(self._message("file_deletion", filename=self._display(file)))
        return True

    def handle_rename(self, old: FileIdentity, new: FileIdentity) -> bool:
        if not self.config.commit_file_renamings:
            return False
        self.staging.reset_stage()

        old_ignored = self.state.is_ignored(old.path)
        new_ignored = self.state.is_ignored(new.path)
        old_tracked = self.state.is_tracked(old.path)
        if not old_tracked and new_ignored:
            # Neither a deletion nor an addition could be committed.
            return False

        verb = self._message("verb_rename" if old.parent == new.parent else "verb_move")
        base_message = self._message(
            "file_renaming",
            verb=verb,
            old_filename=self._display(old),
            new_filename=self._display(new),
        )

        delete_old = False
        create_new = False
        note = ""
        if old_tracked:
            # A tracked file cannot be ignored, so old_ignored is irrelevant here.
            delete_old = True
            if new_ignored:
                note = self._message("new_name_ignored")
            else:
                # Not `git mv`: the file is already at its new location on disk.
                # Git pairs the removal and addition up as a rename by content.
                create_new = True
        else:
            create_new = True
            note = self._message(
                "old_name_ignored" if old_ignored else "old_name_not_committed"
            )

        if delete_old:
            self.staging.stage_remove(old.path)
        if create_new:
            self.staging.stage_add(new.path)

        message = base_message
        if note:
            message += "\n" + note
        self.executor.commit(message)
        return True
