"""Commits staged changes and pushes them to a remote."""

from typing import Optional

from ..models import NothingToCommitError
from ..protocols.author_resolver_protocol import AuthorResolverProtocol
from ..protocols.command_runner_protocol import CommandRunnerProtocol
from ..schemas import CommitterConfig
from .repository_state import RepositoryState


class CommitExecutor:
    """Creates commits and keeps count of them for the current unit of work."""

    def __init__(
        self,
        runner: CommandRunnerProtocol,
        state: RepositoryState,
        config: CommitterConfig,
        author_resolver: Optional[AuthorResolverProtocol] = None,
    ):
        self.runner = runner
        self.state = state
        self.config = config
        self.author_resolver = author_resolver
        self.commit_count = 0

    def commit(self, message: str) -> None:
        """
        Commit whatever is staged, then push right away if configured to.

        A failed push is raised as is; the local commit stays in place.
        """
        if not self.state.has_staged_changes():
            raise NothingToCommitError("No changes are staged to be committed.")

        argv = ["commit", "-q", "-m", message]
        author = self.resolve_author()
        if author:
            argv.extend(["--author", author])
        self.runner.execute(argv)
        self.commit_count += 1
        print(f"📝 Committed: {message.splitlines()[0]}")

        target = self.config.push_target
        if target is not None and self.config.push_immediately:
            self.push_now(target.remote, target.branch)

    def resolve_author(self) -> Optional[str]:
        """
        Return "Name <email>" for the current user, or None to let git use the
        repository's default author.
        """
        if not self.config.automatically_define_author or self.author_resolver is None:
            return None
        user = self.author_resolver()
        if user is None:
            return None

        # Fallbacks are checked to be non-empty when the config is built.
        email = user.email or self.config.supplement_empty_author_email
        name = user.name or self.config.supplement_empty_author_name
        return f"{name} <{email}>"

    def has_pending_commits(self) -> bool:
        return self.commit_count > 0

    def push_now(self, remote: str, branch: Optional[str] = None) -> None:
        argv = ["push", remote]
        if branch:
            argv.append(branch)
        self.runner.execute(argv)
        print(f"🚀 Pushed to {' '.join(argv[1:])}")
