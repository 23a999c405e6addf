from __future__ import annotations

import logging
from typing import Any

from hoarding_booking.application.exceptions import BookedRangesUnavailable
from hoarding_booking.application.ports.booked_ranges import BookedRangesPort


class MockBookedRanges(BookedRangesPort):
    def __init__(self, ranges: dict[str, list[dict[str, Any]]] | None = None) -> None:
        self._ranges: dict[str, list[dict[str, Any]]] = {k: list(v) for k, v in (ranges or {}).items()}
        self._failing: set[str] = set()
        self.calls: list[str] = []
        self._logger = logging.getLogger(__name__)

    def fetch_booked_ranges(self, item_id: str) -> list[dict[str, Any]]:
        self.calls.append(item_id)
        if item_id in self._failing:
            raise BookedRangesUnavailable(f"mock backend down for {item_id}")
        return [dict(r) for r in self._ranges.get(item_id, [])]

    def add_booking(self, item_id: str, start_date: str, end_date: str) -> None:
        self._ranges.setdefault(item_id, []).append({"startDate": start_date, "endDate": end_date})
        self._logger.info(
            "Mock booking added",
            extra={"item_id": item_id, "start": start_date, "end": end_date},
        )

    def fail(self, item_id: str, failing: bool = True) -> None:
        if failing:
            self._failing.add(item_id)
        else:
            self._failing.discard(item_id)
