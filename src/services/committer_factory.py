"""Factory for creating AssetCommitter instances from settings."""

from typing import Mapping, Optional

from ..config.settings import Settings
from ..protocols.author_resolver_protocol import AuthorResolverProtocol
from ..schemas import CommitterConfig, PushTarget
from .asset_committer import AssetCommitter, RunnerFactory, default_runner_factory


def build_committer_config(settings: Settings) -> CommitterConfig:
    """
    Turn application settings into an immutable committer configuration.

    Raises:
        ConfigurationError: if PUSH_TO_AFTER_COMMITTING is malformed.
    """
    return CommitterConfig(
        repository_path=settings.ASSET_REPOSITORY_PATH,
        base_path=settings.ASSET_BASE_PATH,
        push_target=PushTarget.parse(settings.PUSH_TO_AFTER_COMMITTING),
        push_immediately=settings.PUSH_IMMEDIATELY,
        automatically_define_author=settings.AUTOMATICALLY_DEFINE_AUTHOR,
        supplement_empty_author_email=settings.SUPPLEMENT_EMPTY_AUTHOR_EMAIL,
        supplement_empty_author_name=settings.SUPPLEMENT_EMPTY_AUTHOR_NAME,
        commit_file_creations=settings.COMMIT_FILE_CREATIONS,
        commit_file_deletions=settings.COMMIT_FILE_DELETIONS,
        commit_file_renamings=settings.COMMIT_FILE_RENAMINGS,
        git_executable=settings.GIT_EXECUTABLE,
    )


def create_asset_committer(
    config: CommitterConfig,
    author_resolver: Optional[AuthorResolverProtocol] = None,
    runner_factory: RunnerFactory = default_runner_factory,
    messages: Optional[Mapping[str, str]] = None,
) -> AssetCommitter:
    """
    Create an AssetCommitter for one unit of work.

    Args:
        config: Committer configuration
        author_resolver: Callable returning the current user, if any
        runner_factory: Builds the command runner once the repository is opened
        messages: Replacement commit message templates (translations)

    Returns:
        AssetCommitter instance
    """
    return AssetCommitter(
        config,
        author_resolver=author_resolver,
        runner_factory=runner_factory,
        messages=messages,
    )


def create_asset_committer_from_settings(
    settings: Settings,
    author_resolver: Optional[AuthorResolverProtocol] = None,
) -> AssetCommitter:
    """
    Create an AssetCommitter using application settings.

    Args:
        settings: Application settings
        author_resolver: Callable returning the current user, if any

    Returns:
        AssetCommitter instance
    """
    return create_asset_committer(
        build_committer_config(settings), author_resolver=author_resolver
    )
