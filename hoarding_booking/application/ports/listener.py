from __future__ import annotations

from datetime import date

from hoarding_booking.domain.entities.rejection import RejectionReason


class BookingCalendarListener:
    """Host-side hooks for the booking calendar. Override what you need."""

    def on_selection_change(self, start: date | None, end: date | None) -> None:
        pass

    def on_selection_rejected(self, reason: RejectionReason) -> None:
        pass

    def on_months_window_extended(self, new_months: list[date]) -> None:
        pass
