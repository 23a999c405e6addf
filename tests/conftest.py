from __future__ import annotations

from datetime import date

import pytest

from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.infrastructure.clock.system_clock import FixedClock

TODAY = date(2025, 1, 15)


class RecordingListener(BookingCalendarListener):
    def __init__(self) -> None:
        self.changes: list[tuple[date | None, date | None]] = []
        self.rejections: list = []
        self.extensions: list[list[date]] = []

    def on_selection_change(self, start, end) -> None:
        self.changes.append((start, end))

    def on_selection_rejected(self, reason) -> None:
        self.rejections.append(reason)

    def on_months_window_extended(self, new_months) -> None:
        self.extensions.append(list(new_months))


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(TODAY)


@pytest.fixture
def listener() -> RecordingListener:
    return RecordingListener()
