from __future__ import annotations

from dataclasses import dataclass
from datetime import date


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


@dataclass(frozen=True)
class CalendarDay:
    date: date
    month_key: str  # month the cell's date belongs to, "YYYY-MM"
    is_padding: bool = False  # borrowed from a neighbouring month to fill the week


@dataclass(frozen=True)
class MonthGrid:
    anchor: date  # first day of the month
    weeks: tuple[tuple[CalendarDay, ...], ...]

    @property
    def month_key(self) -> str:
        return month_key(self.anchor)

    def days(self) -> list[CalendarDay]:
        return [day for week in self.weeks for day in week]


@dataclass(frozen=True)
class DayFlags:
    date: date
    is_padding: bool = False
    is_today: bool = False
    is_past: bool = False
    is_booked: bool = False
    is_before_lead_time: bool = False
    is_start: bool = False
    is_end: bool = False
    is_in_range: bool = False

    @property
    def is_disabled(self) -> bool:
        return self.is_padding or self.is_booked or self.is_past or self.is_before_lead_time
