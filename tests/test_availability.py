"""
Tests for the booked-day predicate over a normalized interval set.
"""

from __future__ import annotations

from datetime import date, timedelta

from hoarding_booking.application.utils.availability import AvailabilityIndex, availability_index
from hoarding_booking.domain.entities.booked_interval import BookedInterval


def _days(start: date, end: date):
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


INTERVALS = (
    BookedInterval(date(2025, 3, 1), date(2025, 3, 5)),
    BookedInterval(date(2025, 3, 4), date(2025, 3, 8)),
    BookedInterval(date(2025, 3, 20), date(2025, 3, 20)),
    BookedInterval(date(2025, 4, 1), date(2025, 4, 10)),
)


def test_every_covered_day_is_booked_and_every_other_day_is_free():
    index = AvailabilityIndex(INTERVALS)
    for day in _days(date(2025, 2, 1), date(2025, 5, 1)):
        expected = any(i.start_day <= day <= i.end_day for i in INTERVALS)
        assert index.is_booked(day) is expected, day


def test_boundaries_are_inclusive():
    index = AvailabilityIndex(INTERVALS)
    assert index.is_booked(date(2025, 3, 1))
    assert index.is_booked(date(2025, 3, 8))
    assert index.is_booked(date(2025, 3, 20))
    assert not index.is_booked(date(2025, 2, 28))
    assert not index.is_booked(date(2025, 3, 9))
    assert not index.is_booked(date(2025, 3, 21))


def test_unsorted_input_gives_same_answers():
    index = AvailabilityIndex(tuple(reversed(INTERVALS)))
    assert index.is_booked(date(2025, 3, 6))
    assert not index.is_booked(date(2025, 3, 15))


def test_any_booked_checks_every_day_of_the_span():
    index = AvailabilityIndex(INTERVALS)
    # Both endpoints free, a booked day in between.
    assert index.any_booked(date(2025, 3, 15), date(2025, 3, 25))
    assert not index.any_booked(date(2025, 3, 9), date(2025, 3, 19))
    assert index.any_booked(date(2025, 3, 9), date(2025, 3, 20))
    assert index.any_booked(date(2025, 2, 1), date(2025, 5, 1))
    assert not index.any_booked(date(2025, 4, 11), date(2025, 12, 31))


def test_empty_set_books_nothing():
    index = AvailabilityIndex(())
    assert not index.is_booked(date(2025, 3, 1))
    assert not index.any_booked(date(2025, 1, 1), date(2030, 1, 1))


def test_index_is_memoized_per_interval_set():
    first = availability_index(INTERVALS)
    assert availability_index(INTERVALS) is first
    replaced = availability_index(INTERVALS[:1])
    assert replaced is not first
    assert not replaced.is_booked(date(2025, 3, 20))
