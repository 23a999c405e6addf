from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from hoarding_booking.application.ports.clock import ClockPort
from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.application.utils.availability import AvailabilityIndex, availability_index
from hoarding_booking.domain.entities.rejection import RejectionReason
from hoarding_booking.domain.entities.selection_state import (
    Complete,
    Empty,
    SelectionState,
    StartOnly,
    selection_bounds,
)


@dataclass(frozen=True)
class TapResult:
    state: SelectionState
    rejection: RejectionReason | None = None

    @property
    def accepted(self) -> bool:
        return self.rejection is None


class RangeSelectionUseCase:
    """Start/end date picking for one hoarding's calendar.

    Every tap ends in a transition or a rejection, and the listener hears
    about both. A rejection leaves the state as it was.
    """

    def __init__(
        self,
        clock: ClockPort,
        availability: AvailabilityIndex | None = None,
        listener: BookingCalendarListener | None = None,
        lead_time_days: int = 4,
        min_booking_days: int = 1,
        max_booking_days: int = 365,
    ) -> None:
        if min_booking_days < 1 or max_booking_days < min_booking_days:
            raise ValueError(
                f"invalid booking length bounds: min={min_booking_days} max={max_booking_days}"
            )
        self._clock = clock
        self._availability = availability or availability_index(())
        self._listener = listener or BookingCalendarListener()
        self._lead_time = timedelta(days=lead_time_days)
        self._min_days = min_booking_days
        self._max_days = max_booking_days
        self._state: SelectionState = Empty()
        self._logger = logging.getLogger(__name__)

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def availability(self) -> AvailabilityIndex:
        return self._availability

    def earliest_start(self) -> date:
        return self._clock.today() + self._lead_time

    def replace_availability(self, availability: AvailabilityIndex) -> None:
        """Swap in a refreshed interval set; a changed set drops any selection in progress."""
        unchanged = availability is self._availability or availability.intervals == self._availability.intervals
        self._availability = availability
        if unchanged:
            return
        if not isinstance(self._state, Empty):
            self._logger.info("Booked ranges changed under selection; resetting")
            self._set_state(Empty())

    def restart(self) -> SelectionState:
        self._set_state(Empty())
        return self._state

    def reopen_picker(self) -> SelectionState:
        """Changing either end of a range starts over from an empty selection."""
        return self.restart()

    def tap(self, day: date) -> TapResult:
        if self._availability.is_booked(day):
            return self._reject(RejectionReason.booked_date, day)

        state = self._state
        if isinstance(state, (Empty, Complete)):
            return self._begin(day)

        if isinstance(state, StartOnly):
            if day < state.start:
                return self._begin(day)

            duration = (day - state.start).days + 1
            if duration < self._min_days:
                return self._reject(RejectionReason.too_short, day)
            if duration > self._max_days:
                return self._reject(RejectionReason.too_long, day)
            if self._availability.any_booked(state.start, day):
                return self._reject(RejectionReason.crosses_booked, day)
            return self._accept(Complete(start=state.start, end=day))

        raise TypeError(f"unknown selection state: {state!r}")

    def _begin(self, day: date) -> TapResult:
        if day < self.earliest_start():
            return self._reject(RejectionReason.lead_time_violation, day)
        return self._accept(StartOnly(start=day))

    def _accept(self, state: SelectionState) -> TapResult:
        self._set_state(state)
        return TapResult(state=state)

    def _reject(self, reason: RejectionReason, day: date) -> TapResult:
        self._logger.info("Selection rejected", extra={"reason": reason.value, "day": day.isoformat()})
        self._listener.on_selection_rejected(reason)
        return TapResult(state=self._state, rejection=reason)

    def _set_state(self, state: SelectionState) -> None:
        self._state = state
        start, end = selection_bounds(state)
        self._listener.on_selection_change(start, end)
