"""Schemas for the application."""

from .committer import Author, CommitterConfig, PushTarget
from .events import (
    BatchResult,
    CommitterStatus,
    EventBatch,
    EventResult,
    FileCreated,
    FileDeleted,
    FileEvent,
    FileRenamed,
    FileStatusResponse,
)

__all__ = [
    "Author",
    "BatchResult",
    "CommitterConfig",
    "CommitterStatus",
    "EventBatch",
    "EventResult",
    "FileCreated",
    "FileDeleted",
    "FileEvent",
    "FileRenamed",
    "FileStatusResponse",
    "PushTarget",
]
