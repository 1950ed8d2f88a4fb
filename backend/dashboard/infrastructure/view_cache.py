"""View Cache — short-lived cache of read projections, invalidated by mutations.

Invariants:
    - Entries are keyed by (route path, query key) and expire after ttl_seconds
    - Each path holds at most maxsize entries; expired entries are evicted on
      every write, so user-supplied query strings cannot grow the cache
    - invalidate(path) drops every entry for that path; the next read re-fetches
    - Holds only disposable projections: losing it (restart) never loses data

Design Decisions:
    - One cachetools.TTLCache per path: invalidation is a single pop
    - Per-process: single event loop, no locking needed
    - Injectable timer: tests control expiry without sleeping
    - ttl_seconds <= 0 disables caching (every get misses)
"""

import logging
import time
from typing import Any, Callable

from cachetools import TTLCache
from fastapi import Request

logger = logging.getLogger(__name__)


class ViewCache:
    """Path-scoped TTL cache for rendered read projections."""

    def __init__(
        self,
        ttl_seconds: float = 30.0,
        maxsize: int = 256,
        timer: Callable[[], float] = time.monotonic,
    ):
        self.ttl_seconds = ttl_seconds
        self.maxsize = maxsize
        self._timer = timer
        self._entries: dict[str, TTLCache] = {}

    def get(self, path: str, key: str) -> Any | None:
        cache = self._entries.get(path)
        if cache is None:
            return None
        return cache.get(key)

    def put(self, path: str, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        cache = self._entries.get(path)
        if cache is None:
            cache = TTLCache(
                maxsize=self.maxsize, ttl=self.ttl_seconds, timer=self._timer,
            )
            self._entries[path] = cache
        cache[key] = value

    def invalidate(self, path: str) -> None:
        dropped = self._entries.pop(path, None)
        logger.info(
            f"Invalidated view cache for {path} ({len(dropped or {})} entries)",
            extra={"path": path},
        )


def get_view_cache(request: Request) -> ViewCache:
    """FastAPI dependency for the process-wide view cache."""
    cache = getattr(request.app.state, "view_cache", None)
    if cache is None:
        raise RuntimeError("View cache not initialized")
    return cache
