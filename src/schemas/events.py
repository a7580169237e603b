"""File lifecycle events and API payloads."""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class FileCreated(BaseModel):
    """A file was uploaded to the asset store."""

    kind: Literal["created"] = "created"
    path: str

    def signature(self) -> tuple:
        return (self.kind, self.path)

    def paths(self) -> List[str]:
        return [self.path]


class FileDeleted(BaseModel):
    """A file was removed from the asset store (already gone from disk)."""

    kind: Literal["deleted"] = "deleted"
    path: str

    def signature(self) -> tuple:
        return (self.kind, self.path)

    def paths(self) -> List[str]:
        return [self.path]


class FileRenamed(BaseModel):
    """A file was renamed or moved (already at new_path on disk)."""

    kind: Literal["renamed"] = "renamed"
    old_path: str
    new_path: str

    def signature(self) -> tuple:
        return (self.kind, self.old_path, self.new_path)

    def paths(self) -> List[str]:
        return [self.old_path, self.new_path]


FileEvent = Annotated[
    Union[FileCreated, FileDeleted, FileRenamed], Field(discriminator="kind")
]


class EventBatch(BaseModel):
    events: List[FileEvent]


class EventResult(BaseModel):
    status: str  # 'processed' or 'duplicate'
    commits: int
    pushed: bool = False


class BatchResult(BaseModel):
    processed: int
    duplicates: int
    commits: int
    pushed: bool = False


class FileStatusResponse(BaseModel):
    path: str
    ignored: bool
    tracked: bool
    modified: bool


class CommitterStatus(BaseModel):
    repository_path: str
    pushing_enabled: bool
    push_immediately: bool
    push_target: Optional[str] = None
    has_staged_changes: bool
