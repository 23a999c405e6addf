from __future__ import annotations

import calendar
import logging
from datetime import date

from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.domain.entities.calendar_day import CalendarDay, MonthGrid, month_key

logger = logging.getLogger(__name__)


def add_months(anchor: date, count: int) -> date:
    years, month_index = divmod(anchor.month - 1 + count, 12)
    return date(anchor.year + years, month_index + 1, 1)


def build_month_grid(anchor: date, week_start: int = calendar.SUNDAY) -> MonthGrid:
    """Full weeks covering the anchor's month, padded with neighbouring days."""
    anchor = anchor.replace(day=1)
    weeks = calendar.Calendar(firstweekday=week_start).monthdatescalendar(anchor.year, anchor.month)
    return MonthGrid(
        anchor=anchor,
        weeks=tuple(
            tuple(
                CalendarDay(date=day, month_key=month_key(day), is_padding=day.month != anchor.month)
                for day in week
            )
            for week in weeks
        ),
    )


class MonthWindow:
    """Append-only run of month anchors starting at the current month.

    Grids are built on first access and kept; extension never rebuilds them.
    A fresh instance is the only way to start over.
    """

    def __init__(
        self,
        today: date,
        initial_months: int = 24,
        step_months: int = 12,
        max_months: int = 60,
        week_start: int = calendar.SUNDAY,
        near_end_margin: int = 6,
        listener: BookingCalendarListener | None = None,
    ) -> None:
        if initial_months < 1 or step_months < 1 or max_months < 1:
            raise ValueError("month window sizes must be positive")
        self._origin = today.replace(day=1)
        self._step = step_months
        self._max = max_months
        self._week_start = week_start
        self._near_end_margin = near_end_margin
        self._listener = listener or BookingCalendarListener()
        self._months: list[date] = [add_months(self._origin, i) for i in range(min(initial_months, max_months))]
        self._grids: dict[int, MonthGrid] = {}

    def __len__(self) -> int:
        return len(self._months)

    @property
    def months(self) -> tuple[date, ...]:
        return tuple(self._months)

    @property
    def is_exhausted(self) -> bool:
        return len(self._months) >= self._max

    def signal_near_end(self, seen_count: int) -> list[date]:
        """Extend the window once per materialized length.

        `seen_count` is the window length the consumer was rendering when it hit
        the end. A signal that refers to an older length was already served and
        is ignored, so bursts of the same signal append only once.
        """
        if seen_count != len(self._months):
            logger.debug(
                "Ignoring stale month window signal",
                extra={"count": seen_count, "months": len(self._months)},
            )
            return []
        if self.is_exhausted:
            return []

        last = self._months[-1]
        room = min(self._step, self._max - len(self._months))
        new_months = [add_months(last, i) for i in range(1, room + 1)]
        self._months.extend(new_months)
        logger.debug("Month window extended", extra={"count": len(new_months), "months": len(self._months)})
        self._listener.on_months_window_extended(list(new_months))
        return new_months

    def on_visible(self, last_visible_index: int) -> list[date]:
        """Extend when the last visible month is within the margin of the end."""
        if last_visible_index < len(self._months) - self._near_end_margin:
            return []
        return self.signal_near_end(len(self._months))

    def grid(self, index: int) -> MonthGrid:
        if not 0 <= index < len(self._months):
            raise IndexError(f"month index {index} outside window of {len(self._months)}")
        grid = self._grids.get(index)
        if grid is None:
            grid = build_month_grid(self._months[index], self._week_start)
            self._grids[index] = grid
        return grid

    def materialized_grids(self) -> int:
        return len(self._grids)
