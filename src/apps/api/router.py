import asyncio
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException

from src.dependencies import get_asset_committer, get_event_filter, get_repository_lock
from src.models import (
    AssetCommitterError,
    CommandError,
    ConfigurationError,
    InvalidArgumentError,
    NothingToCommitError,
)
from src.schemas import (
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
from src.services import AssetCommitter, DuplicateEventFilter

router = APIRouter(prefix="/asset-committer", tags=["asset-committer"])


def _to_http_exception(e: AssetCommitterError) -> HTTPException:
    if isinstance(e, InvalidArgumentError):
        return HTTPException(status_code=400, detail=str(e))
    if isinstance(e, NothingToCommitError):
        return HTTPException(status_code=409, detail=str(e))
    if isinstance(e, CommandError):
        return HTTPException(
            status_code=502,
            detail={
                "message": str(e).splitlines()[0],
                "exit_code": e.exit_code,
                "output": e.output,
            },
        )
    if isinstance(e, ConfigurationError):
        return HTTPException(status_code=500, detail=f"Configuration error: {str(e)}")
    return HTTPException(status_code=500, detail=str(e))


def _process_events(
    committer: AssetCommitter,
    event_filter: DuplicateEventFilter,
    events: List[FileEvent],
) -> BatchResult:
    """Reconcile events in order, then push once if anything was committed."""
    processed = 0
    duplicates = 0
    with get_repository_lock(committer.repository_path):
        for event in events:
            signature = event.signature()
            if event_filter.is_duplicate(signature, event.paths()):
                print(f"Skipping duplicate event: {signature}")
                duplicates += 1
                continue
            try:
                committer.handle(event)
            except Exception:
                event_filter.forget(signature, event.paths())
                raise
            processed += 1
        pushed = committer.push_if_pending()
    return BatchResult(
        processed=processed,
        duplicates=duplicates,
        commits=committer.commit_count,
        pushed=pushed,
    )


async def _handle_single(
    event: FileEvent, committer: AssetCommitter, event_filter: DuplicateEventFilter
) -> EventResult:
    try:
        result = await asyncio.to_thread(_process_events, committer, event_filter, [event])
    except AssetCommitterError as e:
        raise _to_http_exception(e)
    return EventResult(
        status="duplicate" if result.duplicates else "processed",
        commits=result.commits,
        pushed=result.pushed,
    )


@router.post("/files/created", response_model=EventResult)
async def file_created(
    event: FileCreated,
    committer: AssetCommitter = Depends(get_asset_committer),
    event_filter: DuplicateEventFilter = Depends(get_event_filter),
):
    """
    Commit a newly uploaded file.

    Folders are not committed: a path naming an existing directory is
    rejected with 400 instead of being skipped, so the caller learns that it
    must send one event per file.
    """
    return await _handle_single(event, committer, event_filter)


@router.post("/files/deleted", response_model=EventResult)
async def file_deleted(
    event: FileDeleted,
    committer: AssetCommitter = Depends(get_asset_committer),
    event_filter: DuplicateEventFilter = Depends(get_event_filter),
):
    """Commit the removal of a file."""
    return await _handle_single(event, committer, event_filter)


@router.post("/files/renamed", response_model=EventResult)
async def file_renamed(
    event: FileRenamed,
    committer: AssetCommitter = Depends(get_asset_committer),
    event_filter: DuplicateEventFilter = Depends(get_event_filter),
):
    """Commit a renamed or moved file."""
    return await _handle_single(event, committer, event_filter)


@router.post("/events", response_model=BatchResult)
async def process_events(
    batch: EventBatch,
    committer: AssetCommitter = Depends(get_asset_committer),
    event_filter: DuplicateEventFilter = Depends(get_event_filter),
):
    """
    Commit several events in one request, e.g. every file of a renamed folder.
    Deferred pushing happens once at the end.
    """
    try:
        return await asyncio.to_thread(
            _process_events, committer, event_filter, batch.events
        )
    except AssetCommitterError as e:
        raise _to_http_exception(e)


@router.get("/files/status", response_model=FileStatusResponse)
async def file_status(
    path: str, committer: AssetCommitter = Depends(get_asset_committer)
):
    """Whether a file is ignored, tracked and modified."""
    try:
        status = await asyncio.to_thread(committer.file_status, path)
    except AssetCommitterError as e:
        raise _to_http_exception(e)
    return FileStatusResponse(**status)


@router.get("/status", response_model=CommitterStatus)
async def get_status(committer: AssetCommitter = Depends(get_asset_committer)):
    """Repository location, push configuration and staging state."""
    try:
        staged = await asyncio.to_thread(committer.state.has_staged_changes)
    except AssetCommitterError as e:
        raise _to_http_exception(e)
    target = committer.config.push_target
    return CommitterStatus(
        repository_path=committer.repository.root,
        pushing_enabled=committer.is_pushing_enabled(),
        push_immediately=committer.config.push_immediately,
        push_target=str(target) if target else None,
        has_staged_changes=staged,
    )


@router.post("/push", response_model=Dict[str, Any])
async def push(committer: AssetCommitter = Depends(get_asset_committer)):
    """Push to the configured remote right away."""

    def _push():
        with get_repository_lock(committer.repository_path):
            committer.flush_push()

    try:
        await asyncio.to_thread(_push)
    except AssetCommitterError as e:
        raise _to_http_exception(e)
    return {"status": "pushed", "target": str(committer.config.push_target)}
