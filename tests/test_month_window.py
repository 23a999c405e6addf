"""
Tests for the lazily extended month window and its calendar grids.
"""

from __future__ import annotations

import calendar
from datetime import date

import pytest

from hoarding_booking.application.utils.month_window import MonthWindow, add_months, build_month_grid

TODAY = date(2025, 1, 15)


def test_window_starts_at_current_month_with_24_months():
    window = MonthWindow(TODAY)
    assert len(window) == 24
    assert window.months[0] == date(2025, 1, 1)
    assert window.months[-1] == date(2026, 12, 1)


def test_repeated_near_end_signal_appends_once():
    """Two signals for the same window length extend to 36, never 48."""
    window = MonthWindow(TODAY)
    seen = len(window)
    first = window.signal_near_end(seen)
    second = window.signal_near_end(seen)
    assert len(first) == 12
    assert second == []
    assert len(window) == 36
    assert window.months[24] == date(2027, 1, 1)


def test_window_is_capped_at_60_months(listener):
    window = MonthWindow(TODAY, listener=listener)
    while window.signal_near_end(len(window)):
        pass
    assert len(window) == 60
    assert window.is_exhausted
    assert [len(batch) for batch in listener.extensions] == [12, 12, 12]
    assert window.signal_near_end(60) == []


def test_cap_trims_the_last_batch():
    window = MonthWindow(TODAY, initial_months=24, step_months=12, max_months=30)
    assert len(window.signal_near_end(24)) == 6
    assert len(window) == 30


def test_months_are_consecutive_and_unique():
    window = MonthWindow(TODAY)
    window.signal_near_end(24)
    window.signal_near_end(36)
    months = window.months
    assert len(set(months)) == len(months)
    for prev, nxt in zip(months, months[1:]):
        assert add_months(prev, 1) == nxt


def test_on_visible_only_extends_near_the_end():
    window = MonthWindow(TODAY, near_end_margin=6)
    assert window.on_visible(10) == []
    assert len(window.on_visible(20)) == 12
    # The same scroll position no longer counts as near the end.
    assert window.on_visible(20) == []
    assert len(window) == 36


def test_grid_rows_are_full_weeks_with_padding():
    grid = build_month_grid(date(2025, 1, 1), calendar.SUNDAY)
    assert grid.month_key == "2025-01"
    assert all(len(week) == 7 for week in grid.weeks)
    first = grid.weeks[0][0]
    last = grid.weeks[-1][-1]
    assert first.date == date(2024, 12, 29)
    assert first.is_padding and first.month_key == "2024-12"
    assert last.date == date(2025, 2, 1)
    assert last.is_padding
    assert all(d.date.weekday() == calendar.SUNDAY for d in (week[0] for week in grid.weeks))
    in_month = [d for d in grid.days() if not d.is_padding]
    assert len(in_month) == 31


def test_monday_week_start():
    grid = build_month_grid(date(2025, 1, 1), calendar.MONDAY)
    assert grid.weeks[0][0].date == date(2024, 12, 30)
    assert grid.weeks[-1][-1].date == date(2025, 2, 2)


def test_grids_are_built_lazily_and_kept():
    window = MonthWindow(TODAY)
    assert window.materialized_grids() == 0
    grid = window.grid(3)
    assert grid.anchor == date(2025, 4, 1)
    assert window.grid(3) is grid
    window.signal_near_end(24)
    assert window.grid(3) is grid
    assert window.materialized_grids() == 1


def test_grid_outside_window_raises():
    window = MonthWindow(TODAY)
    with pytest.raises(IndexError):
        window.grid(24)


def test_add_months_crosses_years():
    assert add_months(date(2025, 11, 1), 3) == date(2026, 2, 1)
    assert add_months(date(2025, 1, 31), 1) == date(2025, 2, 1)
