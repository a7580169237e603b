"""Entry point used by the asset store to mirror file events into git."""

import os
from typing import Any, Callable, Dict, Mapping, Optional

from ..models import ConfigurationError, FileIdentity, RepositoryHandle
from ..protocols.author_resolver_protocol import AuthorResolverProtocol
from ..protocols.command_runner_protocol import CommandRunnerProtocol
from ..schemas import CommitterConfig, FileCreated, FileDeleted, FileEvent, FileRenamed
from .command_runner import GitCommandRunner
from .commit_executor import CommitExecutor
from .reconciliation_engine import ReconciliationEngine
from .repository_state import RepositoryState
from .staging_controller import StagingController

RunnerFactory = Callable[[RepositoryHandle, CommitterConfig], CommandRunnerProtocol]


def default_runner_factory(
    handle: RepositoryHandle, config: CommitterConfig
) -> CommandRunnerProtocol:
    return GitCommandRunner(handle.root, git_executable=config.git_executable)


class AssetCommitter:
    """
    Commits file creations, deletions and renames to the configured repository.

    One instance covers one unit of work (typically a request). The repository
    handle is opened on first use and kept for the lifetime of the instance.
    Events must not be handled concurrently against the same repository; the
    embedder is responsible for serializing them.
    """

    def __init__(
        self,
        config: CommitterConfig,
        author_resolver: Optional[AuthorResolverProtocol] = None,
        runner_factory: RunnerFactory = default_runner_factory,
        messages: Optional[Mapping[str, str]] = None,
    ):
        self.config = config
        self.author_resolver = author_resolver
        self.runner_factory = runner_factory
        self.messages = messages
        self._handle: Optional[RepositoryHandle] = None
        self._state: Optional[RepositoryState] = None
        self._executor: Optional[CommitExecutor] = None
        self._engine: Optional[ReconciliationEngine] = None

    @property
    def repository_path(self) -> str:
        """Absolute repository path as configured (not validated)."""
        return os.path.abspath(
            os.path.join(self.config.base_path, self.config.repository_path)
        )

    def _ensure_repository(self) -> ReconciliationEngine:
        if self._engine is None:
            handle = RepositoryHandle(self.repository_path)
            runner = self.runner_factory(handle, self.config)
            state = RepositoryState(runner)
            staging = StagingController(runner, state)
            executor = CommitExecutor(runner, state, self.config, self.author_resolver)
            self._engine = ReconciliationEngine(
                state,
                staging,
                executor,
                self.config,
                repository_root=handle.root,
                messages=self.messages,
            )
            self._handle = handle
            self._state = state
            self._executor = executor
        return self._engine

    @property
    def repository(self) -> RepositoryHandle:
        self._ensure_repository()
        return self._handle

    @property
    def state(self) -> RepositoryState:
        self._ensure_repository()
        return self._state

    def _identity(self, value: Any) -> FileIdentity:
        return FileIdentity.from_value(value, self.config.base_path)

    def on_file_created(self, file: Any) -> bool:
        identity = self._identity(file)
        return self._ensure_repository().handle_create(identity)

    def on_file_deleted(self, file: Any) -> bool:
        identity = self._identity(file)
        return self._ensure_repository().handle_delete(identity)

    def on_file_renamed(self, old_path: Any, new_path: Any) -> bool:
        old = self._identity(old_path)
        new = self._identity(new_path)
        return self._ensure_repository().handle_rename(old, new)

    def handle(self, event: FileEvent) -> bool:
        """Dispatch a tagged event to the matching lifecycle operation."""
        if isinstance(event, FileCreated):
            return self.on_file_created(event.path)
        if isinstance(event, FileDeleted):
            return self.on_file_deleted(event.path)
        if isinstance(event, FileRenamed):
            return self.on_file_renamed(event.old_path, event.new_path)
        raise TypeError(f"Unsupported event: {event!r}")

    @property
    def commit_count(self) -> int:
        return self._executor.commit_count if self._executor else 0

    def has_pending_commits(self) -> bool:
        return self._executor is not None and self._executor.has_pending_commits()

    def is_pushing_enabled(self) -> bool:
        return self.config.pushing_enabled

    def flush_push(self) -> None:
        """Push to the configured target now."""
        target = self.config.push_target
        if target is None:
            raise ConfigurationError(
                "Cannot push: no push target is configured (PUSH_TO_AFTER_COMMITTING)."
            )
        self._ensure_repository()
        self._executor.push_now(target.remote, target.branch)

    def push_if_pending(self) -> bool:
        """
        End-of-request hook: push once if commits were made and they were not
        already pushed one by one. Returns True when a push happened.
        """
        if not self.is_pushing_enabled() or self.config.push_immediately:
            return False
        if not self.has_pending_commits():
            return False
        self.flush_push()
        return True

    def file_status(self, file: Any) -> Dict[str, Any]:
        """Report what git currently knows about one file."""
        identity = self._identity(file)
        state = self.state
        return {
            "path": identity.path,
            "ignored": state.is_ignored(identity.path),
            "tracked": state.is_tracked(identity.path),
            "modified": state.is_modified(identity.path),
        }
