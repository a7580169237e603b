"""Models for the application."""

from .errors import (
    AssetCommitterError,
    CommandError,
    ConfigurationError,
    InvalidArgumentError,
    NothingToCommitError,
)
from .file_identity import FileIdentity
from .repository_handle import RepositoryHandle

__all__ = [
    "AssetCommitterError",
    "CommandError",
    "ConfigurationError",
    "FileIdentity",
    "InvalidArgumentError",
    "NothingToCommitError",
    "RepositoryHandle",
]
