"""Author resolver protocol interface."""

from typing import Optional, Protocol, runtime_checkable

from ..schemas import Author


@runtime_checkable
class AuthorResolverProtocol(Protocol):
    """Supplies the currently authenticated user, or None when nobody is logged in."""

    def __call__(self) -> Optional[Author]: ...
