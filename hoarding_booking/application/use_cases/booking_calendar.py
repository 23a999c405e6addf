from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Iterable

from hoarding_booking.application.exceptions import BookedRangesUnavailable
from hoarding_booking.application.ports.booked_ranges import BookedRangesPort
from hoarding_booking.application.ports.cache import CachePort
from hoarding_booking.application.ports.clock import ClockPort
from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.application.use_cases.pricing import compute_price, compute_price_for_range
from hoarding_booking.application.use_cases.range_selection import RangeSelectionUseCase, TapResult
from hoarding_booking.application.utils.availability import availability_index
from hoarding_booking.application.utils.intervals import DEFAULT_UTC_OFFSET_MINUTES, normalize_booked_ranges
from hoarding_booking.application.utils.month_window import MonthWindow
from hoarding_booking.domain.entities.booked_interval import BookedInterval
from hoarding_booking.domain.entities.calendar_day import CalendarDay, DayFlags, MonthGrid
from hoarding_booking.domain.entities.pricing import PriceBreakdown, PriceInputs
from hoarding_booking.domain.entities.selection_state import Complete, Empty, SelectionState, StartOnly


def booked_ranges_cache_key(item_id: str) -> str:
    return f"booked-ranges:{item_id}"


class BookingCalendarUseCase:
    """Availability, selection, month paging and pricing for one hoarding."""

    def __init__(
        self,
        item_id: str,
        booked_ranges: BookedRangesPort,
        cache: CachePort,
        clock: ClockPort,
        listener: BookingCalendarListener | None = None,
        price_inputs: PriceInputs | None = None,
        utc_offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES,
        lead_time_days: int = 4,
        min_booking_days: int = 1,
        max_booking_days: int = 365,
        initial_months: int = 24,
        step_months: int = 12,
        max_months: int = 60,
        week_start: int = 6,
    ) -> None:
        self._item_id = str(item_id)
        self._booked_ranges = booked_ranges
        self._cache = cache
        self._clock = clock
        self._listener = listener or BookingCalendarListener()
        self._price_inputs = price_inputs or PriceInputs()
        self._utc_offset_minutes = utc_offset_minutes
        self._intervals: tuple[BookedInterval, ...] = ()
        self._selection = RangeSelectionUseCase(
            clock=clock,
            availability=availability_index(self._intervals),
            listener=self._listener,
            lead_time_days=lead_time_days,
            min_booking_days=min_booking_days,
            max_booking_days=max_booking_days,
        )
        self._window = MonthWindow(
            today=clock.today(),
            initial_months=initial_months,
            step_months=step_months,
            max_months=max_months,
            week_start=week_start,
            listener=self._listener,
        )
        self._logger = logging.getLogger(__name__)

    @property
    def item_id(self) -> str:
        return self._item_id

    @property
    def intervals(self) -> tuple[BookedInterval, ...]:
        return self._intervals

    @property
    def state(self) -> SelectionState:
        return self._selection.state

    @property
    def months(self) -> tuple[date, ...]:
        return self._window.months

    @property
    def price_inputs(self) -> PriceInputs:
        return self._price_inputs

    def refresh(self, force: bool = False) -> tuple[BookedInterval, ...]:
        """Reload booked ranges through the cache and replace the resident set.

        A failing backend counts as "nothing booked".
        """
        key = booked_ranges_cache_key(self._item_id)

        def fetch() -> list[dict[str, Any]]:
            return self._booked_ranges.fetch_booked_ranges(self._item_id)

        try:
            raw = self._cache.force_refresh(key, fetch) if force else self._cache.get_or_fetch(key, fetch)
        except BookedRangesUnavailable as e:
            self._logger.warning(
                "Booked ranges unavailable; treating item as free",
                extra={"item_id": self._item_id, "error": str(e)},
            )
            raw = []
        return self.apply_booked_ranges(raw)

    def apply_booked_ranges(self, raw_ranges: Iterable[Any] | None) -> tuple[BookedInterval, ...]:
        # Last write wins: whatever arrives replaces the resident set outright.
        intervals = normalize_booked_ranges(raw_ranges, self._utc_offset_minutes)
        self._intervals = intervals
        self._selection.replace_availability(availability_index(intervals))
        self._logger.debug("Booked ranges applied", extra={"item_id": self._item_id, "count": len(intervals)})
        return intervals

    def invalidate(self) -> None:
        self._cache.invalidate(booked_ranges_cache_key(self._item_id))

    def is_booked(self, day: date) -> bool:
        return self._selection.availability.is_booked(day)

    def tap(self, day: date) -> TapResult:
        return self._selection.tap(day)

    def restart(self) -> SelectionState:
        return self._selection.restart()

    def reopen_picker(self) -> SelectionState:
        return self._selection.reopen_picker()

    def signal_near_end(self, seen_count: int) -> list[date]:
        return self._window.signal_near_end(seen_count)

    def on_visible(self, last_visible_index: int) -> list[date]:
        return self._window.on_visible(last_visible_index)

    def month_grid(self, index: int) -> MonthGrid:
        return self._window.grid(index)

    def day_flags(self, cell: CalendarDay | date) -> DayFlags:
        if isinstance(cell, CalendarDay):
            day, is_padding = cell.date, cell.is_padding
        else:
            day, is_padding = cell, False

        today = self._clock.today()
        state = self._selection.state
        picking_start = isinstance(state, (Empty, Complete))
        start = state.start if isinstance(state, (StartOnly, Complete)) else None
        end = state.end if isinstance(state, Complete) else None

        return DayFlags(
            date=day,
            is_padding=is_padding,
            is_today=day == today,
            # Today counts as past: the current day can never be rented.
            is_past=day <= today,
            is_booked=self.is_booked(day),
            is_before_lead_time=picking_start and day < self._selection.earliest_start(),
            is_start=start is not None and day == start,
            is_end=end is not None and day == end,
            is_in_range=start is not None and end is not None and start <= day <= end,
        )

    def set_price_inputs(self, inputs: PriceInputs) -> PriceBreakdown:
        self._price_inputs = inputs
        return self.quote()

    def quote(self) -> PriceBreakdown:
        """Price for the current selection; an incomplete selection bills one month."""
        state = self._selection.state
        if isinstance(state, Complete):
            return compute_price_for_range(self._price_inputs, state.start, state.end)
        return compute_price(replace(self._price_inputs, months=1))
