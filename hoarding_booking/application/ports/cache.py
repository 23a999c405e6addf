from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class CachePort(ABC):
    @abstractmethod
    def get_or_fetch(self, key: str, fetch: Callable[[], Any]) -> Any:
        """Return the cached value for key if fresh, otherwise fetch and store it."""
        raise NotImplementedError

    @abstractmethod
    def force_refresh(self, key: str, fetch: Callable[[], Any]) -> Any:
        """Fetch unconditionally and store the result."""
        raise NotImplementedError

    @abstractmethod
    def invalidate(self, key: str) -> None:
        raise NotImplementedError
