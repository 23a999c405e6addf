from __future__ import annotations

import logging
import threading
import time
from typing import Any, Callable

from hoarding_booking.application.ports.cache import CachePort


class MemoryCache(CachePort):
    def __init__(self, ttl_seconds: float = 3600.0, now: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl_seconds
        self._now = now
        self._entries: dict[str, tuple[Any, float]] = {}
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def peek(self, key: str) -> tuple[Any, float] | None:
        """Return (value, fetched_at) without fetching, or None."""
        with self._lock:
            return self._entries.get(key)

    def get_or_fetch(self, key: str, fetch: Callable[[], Any]) -> Any:
        entry = self.peek(key)
        if entry is not None and self._now() - entry[1] < self._ttl:
            return entry[0]

        try:
            return self._store(key, fetch())
        except Exception as e:
            if entry is None:
                raise
            # Stale data beats no data when the upstream is down.
            self._logger.warning("Fetch failed; serving stale cache entry", extra={"error": str(e)})
            return entry[0]

    def force_refresh(self, key: str, fetch: Callable[[], Any]) -> Any:
        return self._store(key, fetch())

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def _store(self, key: str, value: Any) -> Any:
        with self._lock:
            self._entries[key] = (value, self._now())
        return value
