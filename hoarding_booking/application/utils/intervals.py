from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, Mapping

from hoarding_booking.application.exceptions import InputDataError
from hoarding_booking.domain.entities.booked_interval import BookedInterval

logger = logging.getLogger(__name__)

# Bookings are stored at midnight UTC but rented by Indian wall-clock day.
DEFAULT_UTC_OFFSET_MINUTES = 330


def local_timezone(offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES) -> timezone:
    return timezone(timedelta(minutes=offset_minutes))


def to_local_day(value: Any, tz: timezone) -> date:
    """Shift a timestamp to the fixed local offset and truncate it to a day.

    Naive timestamps and bare dates in ISO strings are read as UTC, which is how
    the backend stores them. A `date` object is already a wall-clock day.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            raise InputDataError("empty date string")
        try:
            moment = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as e:
            raise InputDataError(f"unparseable date {value!r}") from e
    else:
        raise InputDataError(f"unsupported date value {value!r}")

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).date()


def parse_booked_range(raw: Any, tz: timezone) -> BookedInterval:
    if not isinstance(raw, Mapping):
        raise InputDataError(f"booked range is not a mapping: {raw!r}")

    start_raw = raw.get("startDate")
    end_raw = raw.get("endDate")
    if not start_raw or not end_raw:
        raise InputDataError("booked range is missing startDate or endDate")

    start_day = to_local_day(start_raw, tz)
    end_day = to_local_day(end_raw, tz)
    if start_day > end_day:
        raise InputDataError(f"booked range ends before it starts: {start_day} > {end_day}")
    return BookedInterval(start_day=start_day, end_day=end_day)


def normalize_booked_ranges(
    raw_ranges: Iterable[Any] | None,
    offset_minutes: int = DEFAULT_UTC_OFFSET_MINUTES,
) -> tuple[BookedInterval, ...]:
    """Turn raw {startDate, endDate} records into local-day intervals.

    Malformed entries are dropped. The result is a fresh tuple; callers replace
    their whole interval set with it.
    """
    tz = local_timezone(offset_minutes)
    intervals: list[BookedInterval] = []
    dropped = 0
    for raw in raw_ranges or []:
        try:
            intervals.append(parse_booked_range(raw, tz))
        except InputDataError as e:
            dropped += 1
            logger.debug("Dropping booked range", extra={"error": str(e)})

    if dropped:
        logger.debug("Dropped malformed booked ranges", extra={"count": dropped})
    return tuple(intervals)
