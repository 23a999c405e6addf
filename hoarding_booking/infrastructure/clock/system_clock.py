from __future__ import annotations

from datetime import date, datetime

from hoarding_booking.application.ports.clock import ClockPort
from hoarding_booking.application.utils.intervals import DEFAULT_UTC_OFFSET_MINUTES, local_timezone


class SystemClock(ClockPort):
    def __init__(self, utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES) -> None:
        self._tz = local_timezone(utc_offset_minutes)

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock(ClockPort):
    def __init__(self, today: date) -> None:
        self._today = today

    def today(self) -> date:
        return self._today
