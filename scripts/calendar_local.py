#!/usr/bin/env python3
"""
Interactive local booking calendar harness (no HTTP, no backend).

Usage:
  python3 scripts/calendar_local.py

What it does:
- Builds a BookingCalendarUseCase for one hoarding against in-memory booked ranges
- Lets you tap dates, book ranges, page months and print the price breakdown
- Prints every selection change and rejection the listener receives
"""

from __future__ import annotations

import os
import sys
from datetime import date, timedelta
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.domain.entities.rejection import RejectionReason
from hoarding_booking.infrastructure.booking_api.mock_booked_ranges import MockBookedRanges
from hoarding_booking.infrastructure.store.memory_cache import MemoryCache
from hoarding_booking.wiring.dependencies import default_price_inputs, get_booking_calendar, get_clock

REJECTION_MESSAGES = {
    RejectionReason.booked_date: "This date is already booked",
    RejectionReason.lead_time_violation: "Start date must be at least 4 days from today",
    RejectionReason.too_short: "Selection is shorter than the minimum booking length",
    RejectionReason.too_long: "Selection is longer than the maximum booking length",
    RejectionReason.crosses_booked: "Your selection includes unavailable dates",
}


class PrintingListener(BookingCalendarListener):
    def on_selection_change(self, start: date | None, end: date | None) -> None:
        print(f"(selection) start={start} end={end}")

    def on_selection_rejected(self, reason: RejectionReason) -> None:
        print(f"(rejected) {reason.value}: {REJECTION_MESSAGES[reason]}")

    def on_months_window_extended(self, new_months: list[date]) -> None:
        print(f"(months) +{len(new_months)} -> {new_months[0]:%b %Y} .. {new_months[-1]:%b %Y}")


def _print_header(item_id: str) -> None:
    print("\nLocal Booking Calendar")
    print("-" * 60)
    print(f"item_id: {item_id}")
    print("Type a date (YYYY-MM-DD) or +N (today plus N days) to tap it.")
    print("Commands: /book START END, /month N, /more, /reopen, /price, /quit, /help")
    print("-" * 60)


def _parse_day(text: str, today: date) -> date | None:
    if text.startswith("+") and text[1:].isdigit():
        return today + timedelta(days=int(text[1:]))
    try:
        return date.fromisoformat(text)
    except ValueError:
        return None


def _print_month(calendar, index: int) -> None:
    grid = calendar.month_grid(index)
    print(f"\n{grid.anchor:%B %Y}")
    print(" Su  Mo  Tu  We  Th  Fr  Sa")
    for week in grid.weeks:
        cells = []
        for cell in week:
            flags = calendar.day_flags(cell)
            if flags.is_padding:
                cells.append("  .")
            elif flags.is_booked:
                cells.append("  x")
            elif flags.is_start or flags.is_end:
                cells.append(f"[{cell.date.day:2d}")
            elif flags.is_in_range:
                cells.append(f"~{cell.date.day:2d}")
            elif flags.is_disabled:
                cells.append("  -")
            else:
                cells.append(f"{cell.date.day:3d}")
        print(" ".join(cells))


def main() -> None:
    item_id = os.getenv("HOARDING_ID", "local_hoarding_1")
    backend = MockBookedRanges()
    today = get_clock().today()
    backend.add_booking(
        item_id,
        (today + timedelta(days=10)).isoformat(),
        (today + timedelta(days=12)).isoformat(),
    )
    calendar = get_booking_calendar(
        item_id,
        listener=PrintingListener(),
        price_inputs=default_price_inputs(
            unit_price_per_month=10000,
            printing_charge=500,
            mounting_charge=500,
            discount=1000,
        ),
        booked_ranges=backend,
        cache=MemoryCache(ttl_seconds=0),
    )
    calendar.refresh()
    _print_header(item_id)

    while True:
        try:
            user_text = input("\n> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return

        if not user_text:
            continue

        parts = user_text.split()
        cmd = parts[0].lower()
        if cmd in ("/quit", "/exit"):
            print("Bye!")
            return
        if cmd == "/help":
            print("Commands:")
            print("  YYYY-MM-DD | +N     -> tap a date")
            print("  /book START END     -> add a booked range and refresh")
            print("  /month N            -> print month N of the window (0 = current)")
            print("  /more               -> signal the end of the month window")
            print("  /reopen             -> reopen the picker (clears the selection)")
            print("  /price              -> price breakdown for the selection")
            print("  /quit               -> exit")
            continue
        if cmd == "/book" and len(parts) == 3:
            start, end = _parse_day(parts[1], today), _parse_day(parts[2], today)
            if start is None or end is None:
                print("Could not read dates.")
                continue
            backend.add_booking(item_id, start.isoformat(), end.isoformat())
            intervals = calendar.refresh(force=True)
            print(f"{len(intervals)} booked range(s) loaded")
            continue
        if cmd == "/month":
            index = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else 0
            if index >= len(calendar.months):
                print(f"Window has {len(calendar.months)} months.")
                continue
            _print_month(calendar, index)
            continue
        if cmd == "/more":
            if not calendar.signal_near_end(len(calendar.months)):
                print(f"Window is full at {len(calendar.months)} months.")
            continue
        if cmd == "/reopen":
            calendar.reopen_picker()
            continue
        if cmd == "/price":
            breakdown = calendar.quote()
            print("\n--- Price ---")
            print(f"months: {breakdown.months}")
            print(f"base price (incl. commission): {breakdown.base_price_with_commission:.2f}")
            print(f"printing: {breakdown.printing_charge:.2f}")
            print(f"mounting: {breakdown.mounting_charge:.2f}")
            print(f"discount: -{breakdown.discount:.2f}")
            print(f"subtotal: {breakdown.after_discount:.2f}")
            print(f"gst: {breakdown.tax:.2f}")
            print(f"total: {breakdown.total}")
            continue

        day = _parse_day(user_text, today)
        if day is None:
            print("Unknown input. Type /help.")
            continue
        calendar.tap(day)


if __name__ == "__main__":
    main()
