import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from hoarding_booking.api.v1.schemas import (
    DayFlagsSchema,
    MonthSchema,
    MonthsResponseSchema,
    SelectionRequestSchema,
    SelectionResponseSchema,
)
from hoarding_booking.application.use_cases.booking_calendar import BookingCalendarUseCase
from hoarding_booking.domain.entities.selection_state import Complete, StartOnly
from hoarding_booking.wiring.dependencies import get_booking_calendar

router = APIRouter()
logger = logging.getLogger(__name__)


def load_calendar(item_id: str) -> BookingCalendarUseCase:
    calendar = get_booking_calendar(item_id)
    calendar.refresh()
    return calendar


@router.get("/hoardings/{item_id}/months", response_model=MonthsResponseSchema)
def months(
    item_id: str,
    count: int = Query(1, ge=1, le=60),
    calendar: BookingCalendarUseCase = Depends(load_calendar),
):
    while len(calendar.months) < count:
        if not calendar.signal_near_end(len(calendar.months)):
            break

    result: list[MonthSchema] = []
    for index in range(min(count, len(calendar.months))):
        grid = calendar.month_grid(index)
        weeks = []
        for week in grid.weeks:
            row = []
            for cell in week:
                flags = calendar.day_flags(cell)
                row.append(
                    DayFlagsSchema(
                        day=flags.date,
                        padding=flags.is_padding,
                        today=flags.is_today,
                        past=flags.is_past,
                        booked=flags.is_booked,
                        before_lead_time=flags.is_before_lead_time,
                        disabled=flags.is_disabled,
                    )
                )
            weeks.append(row)
        result.append(MonthSchema(month_key=grid.month_key, weeks=weeks))

    return MonthsResponseSchema(
        item_id=item_id,
        months=result,
        booked_ranges=[(i.start_day, i.end_day) for i in calendar.intervals],
    )


@router.post("/hoardings/{item_id}/selection", response_model=SelectionResponseSchema)
def validate_selection(
    item_id: str,
    req: SelectionRequestSchema,
    calendar: BookingCalendarUseCase = Depends(load_calendar),
):
    if req.end_date < req.start_date:
        raise HTTPException(status_code=400, detail="end_date must be on or after start_date")

    result = calendar.tap(req.start_date)
    if result.accepted:
        result = calendar.tap(req.end_date)

    state = result.state
    if result.accepted and isinstance(state, Complete):
        return SelectionResponseSchema(
            item_id=item_id,
            accepted=True,
            start_date=state.start,
            end_date=state.end,
            days=state.days,
        )

    logger.info("Selection validation failed", extra={"item_id": item_id, "reason": result.rejection})
    return SelectionResponseSchema(
        item_id=item_id,
        accepted=False,
        start_date=state.start if isinstance(state, (StartOnly, Complete)) else None,
        rejection=result.rejection.value if result.rejection else None,
    )
