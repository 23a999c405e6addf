from functools import lru_cache
import logging

from hoarding_booking.application.ports.booked_ranges import BookedRangesPort
from hoarding_booking.application.ports.cache import CachePort
from hoarding_booking.application.ports.clock import ClockPort
from hoarding_booking.application.ports.listener import BookingCalendarListener
from hoarding_booking.application.use_cases.booking_calendar import BookingCalendarUseCase
from hoarding_booking.core.config import settings
from hoarding_booking.domain.entities.pricing import PriceInputs
from hoarding_booking.infrastructure.booking_api.booking_api_client import BookingApiClient
from hoarding_booking.infrastructure.booking_api.mock_booked_ranges import MockBookedRanges
from hoarding_booking.infrastructure.clock.system_clock import SystemClock
from hoarding_booking.infrastructure.store.memory_cache import MemoryCache


@lru_cache
def get_cache() -> CachePort:
    return MemoryCache(ttl_seconds=settings.BOOKED_RANGES_CACHE_TTL_SECONDS)


@lru_cache
def get_clock() -> ClockPort:
    return SystemClock(utc_offset_minutes=settings.LOCAL_UTC_OFFSET_MINUTES)


@lru_cache
def get_booked_ranges() -> BookedRangesPort:
    logger = logging.getLogger(__name__)
    if not settings.BOOKING_API_BASE_URL:
        if settings.ENV.lower() in {"dev", "local", "test"}:
            logger.info("Using MockBookedRanges (BOOKING_API_BASE_URL missing, ENV=%s)", settings.ENV)
            return MockBookedRanges()
        raise ValueError("BOOKING_API_BASE_URL is required to load booked ranges.")

    logger.info("Using BookingApiClient at %s", settings.BOOKING_API_BASE_URL)
    return BookingApiClient()


def default_price_inputs(**overrides) -> PriceInputs:
    values = {
        "commission_rate": str(settings.COMMISSION_RATE),
        "tax_rate": str(settings.TAX_RATE),
    }
    values.update(overrides)
    return PriceInputs(**values)


def get_booking_calendar(
    item_id: str,
    listener: BookingCalendarListener | None = None,
    price_inputs: PriceInputs | None = None,
    booked_ranges: BookedRangesPort | None = None,
    cache: CachePort | None = None,
    clock: ClockPort | None = None,
) -> BookingCalendarUseCase:
    return BookingCalendarUseCase(
        item_id=item_id,
        booked_ranges=booked_ranges or get_booked_ranges(),
        cache=cache or get_cache(),
        clock=clock or get_clock(),
        listener=listener,
        price_inputs=price_inputs or default_price_inputs(),
        utc_offset_minutes=settings.LOCAL_UTC_OFFSET_MINUTES,
        lead_time_days=settings.LEAD_TIME_DAYS,
        min_booking_days=settings.MIN_BOOKING_DAYS,
        max_booking_days=settings.MAX_BOOKING_DAYS,
        initial_months=settings.MONTH_WINDOW_INITIAL,
        step_months=settings.MONTH_WINDOW_STEP,
        max_months=settings.MONTH_WINDOW_MAX,
        week_start=settings.WEEK_START,
    )
