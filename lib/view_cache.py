# =============================================================================
# lib/view_cache.py - Cached Read Views
# =============================================================================
# Small in-process TTL cache for read views (lists and detail pages),
# keyed by path, e.g. "/examples?organization_id=...".
#
# Mutating actions call revalidate_path("/examples") after a successful
# write, which drops that path and every key underneath it, so the next
# read goes back to the database.
#
# Usage:
#   from lib.view_cache import view_cache
#   cached = view_cache.get(key)
#   view_cache.set(key, value)
#   view_cache.revalidate_path("/examples")
# =============================================================================

import logging
import threading
import time
from typing import Any

from app.config import settings

logger = logging.getLogger(__name__)


class ViewCache:
    """TTL cache of rendered views with path-prefix invalidation."""

    def __init__(self, ttl_seconds: int | None = None):
        self._store: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()
        self._ttl_seconds = ttl_seconds

    @property
    def ttl_seconds(self) -> int:
        if self._ttl_seconds is not None:
            return self._ttl_seconds
        return settings.VIEW_CACHE_TTL_SECONDS

    def get(self, key: str) -> Any | None:
        now = time.monotonic()
        with self._lock:
            item = self._store.get(key)
            if not item:
                return None
            value, expires_at = item
            if expires_at < now:
                self._store.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        if self.ttl_seconds <= 0:
            return
        expires_at = time.monotonic() + self.ttl_seconds
        with self._lock:
            self._store[key] = (value, expires_at)

    def revalidate_path(self, path: str) -> int:
        """
        Drop a path and everything under it.

        "/examples" matches "/examples", "/examples?organization_id=..."
        and "/examples/<id>", but not "/examples-archive".

        Returns:
            Number of entries removed
        """
        path = path.rstrip("/") or "/"
        with self._lock:
            stale = [
                key for key in self._store
                if key == path
                or key.startswith(path + "/")
                or key.startswith(path + "?")
            ]
            for key in stale:
                del self._store[key]

        if stale:
            logger.debug(f"Revalidated {path}: dropped {len(stale)} cached view(s)")
        return len(stale)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()


# Shared per-process instance
view_cache = ViewCache()
