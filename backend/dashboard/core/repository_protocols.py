"""Boundary Protocols — contracts between services and the infrastructure shell.

Invariants:
    - Services depend on these Protocols, never on concrete infrastructure classes
    - Implementations provided by the shell via dependency injection (app.state)

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no inheritance
    - SessionProvider.session takes an operation name: the boundary logs and
      wraps store failures with it, so service bodies stay free of try/except
"""

from contextlib import AbstractAsyncContextManager
from typing import Any, Protocol

from sqlalchemy.ext.asyncio import AsyncSession


class SessionProvider(Protocol):
    """Opens one store session per read or write."""
    def session(
        self, operation: str = "unknown",
    ) -> AbstractAsyncContextManager[AsyncSession]: ...


class ViewCacheLike(Protocol):
    """Cached read projections keyed by route path + query key."""
    def get(self, path: str, key: str) -> Any | None: ...
    def put(self, path: str, key: str, value: Any) -> None: ...
    def invalidate(self, path: str) -> None: ...
