import threading
from functools import lru_cache
from typing import Dict, Optional

from fastapi import Depends, Header, HTTPException

from src.config.settings import Settings, get_settings
from src.models import ConfigurationError
from src.protocols.author_resolver_protocol import AuthorResolverProtocol
from src.schemas import Author, CommitterConfig
from src.services import (
    AssetCommitter,
    DuplicateEventFilter,
    build_committer_config,
    create_asset_committer,
)

# Events against one repository are reconciled one at a time.
_repository_locks: Dict[str, threading.Lock] = {}
_repository_locks_guard = threading.Lock()


def get_repository_lock(repository_path: str) -> threading.Lock:
    with _repository_locks_guard:
        lock = _repository_locks.get(repository_path)
        if lock is None:
            lock = _repository_locks[repository_path] = threading.Lock()
        return lock


@lru_cache
def get_event_filter() -> DuplicateEventFilter:
    return DuplicateEventFilter(window=get_settings().DUPLICATE_EVENT_WINDOW)


def get_committer_config(settings: Settings = Depends(get_settings)) -> CommitterConfig:
    try:
        return build_committer_config(settings)
    except ConfigurationError as e:
        raise HTTPException(status_code=500, detail=str(e))


def get_author_resolver(
    x_author_name: Optional[str] = Header(default=None),
    x_author_email: Optional[str] = Header(default=None),
) -> AuthorResolverProtocol:
    """The request headers identify the logged in user, if there is one."""

    def resolve() -> Optional[Author]:
        if x_author_name is None and x_author_email is None:
            return None
        return Author(name=x_author_name or "", email=x_author_email or "")

    return resolve


# One committer per request, so pending commits are counted per request.
def get_asset_committer(
    config: CommitterConfig = Depends(get_committer_config),
    author_resolver: AuthorResolverProtocol = Depends(get_author_resolver),
) -> AssetCommitter:
    return create_asset_committer(config, author_resolver=author_resolver)
