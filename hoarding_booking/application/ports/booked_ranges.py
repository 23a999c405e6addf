from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BookedRangesPort(ABC):
    @abstractmethod
    def fetch_booked_ranges(self, item_id: str) -> list[dict[str, Any]]:
        """Fetch raw booked ranges ({startDate, endDate}) for a hoarding.

        Raises BookedRangesUnavailable when the backend cannot be reached.
        """
        raise NotImplementedError
