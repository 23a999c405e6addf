from __future__ import annotations

from bisect import bisect_right
from datetime import date, timedelta
from functools import lru_cache
from typing import Sequence

from hoarding_booking.domain.entities.booked_interval import BookedInterval


class AvailabilityIndex:
    """Answers "is this day booked?" for one resident interval set.

    Overlapping and touching intervals are merged into sorted disjoint spans,
    so a lookup is a single bisect.
    """

    def __init__(self, intervals: Sequence[BookedInterval]) -> None:
        self._intervals = tuple(intervals)
        self._spans = _merge(self._intervals)
        self._starts = [start for start, _ in self._spans]

    @property
    def intervals(self) -> tuple[BookedInterval, ...]:
        return self._intervals

    def is_booked(self, day: date) -> bool:
        i = bisect_right(self._starts, day) - 1
        return i >= 0 and day <= self._spans[i][1]

    def any_booked(self, start: date, end: date) -> bool:
        """True if any day in [start, end] is booked, endpoints included."""
        if end < start:
            start, end = end, start
        i = bisect_right(self._starts, end) - 1
        return i >= 0 and self._spans[i][1] >= start


def _merge(intervals: Sequence[BookedInterval]) -> list[tuple[date, date]]:
    spans: list[tuple[date, date]] = []
    for interval in sorted(intervals, key=lambda i: (i.start_day, i.end_day)):
        if spans and interval.start_day <= spans[-1][1] + timedelta(days=1):
            last_start, last_end = spans[-1]
            spans[-1] = (last_start, max(last_end, interval.end_day))
        else:
            spans.append((interval.start_day, interval.end_day))
    return spans


@lru_cache(maxsize=32)
def availability_index(intervals: tuple[BookedInterval, ...]) -> AvailabilityIndex:
    """Index for an interval set, memoized on the set itself.

    A replaced set is a different key, so a refresh never serves stale answers.
    """
    return AvailabilityIndex(intervals)
