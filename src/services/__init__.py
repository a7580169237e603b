"""Services for the application."""

from .asset_committer import AssetCommitter
from .command_runner import GitCommandRunner
from .commit_executor import CommitExecutor
from .committer_factory import (
    build_committer_config,
    create_asset_committer,
    create_asset_committer_from_settings,
)
from .event_deduplicator import DuplicateEventFilter
from .reconciliation_engine import COMMIT_MESSAGES, ReconciliationEngine
from .repository_state import RepositoryState
from .staging_controller import StagingController

__all__ = [
    "AssetCommitter",
    "COMMIT_MESSAGES",
    "CommitExecutor",
    "DuplicateEventFilter",
    "GitCommandRunner",
    "ReconciliationEngine",
    "RepositoryState",
    "StagingController",
    "build_committer_config",
    "create_asset_committer",
    "create_asset_committer_from_settings",
]
