from fastapi import APIRouter

from hoarding_booking.api.v1.schemas import PriceBreakdownSchema, PriceQuoteRequestSchema
from hoarding_booking.application.use_cases.pricing import compute_price, compute_price_for_range
from hoarding_booking.domain.entities.pricing import PriceBreakdown
from hoarding_booking.wiring.dependencies import default_price_inputs

router = APIRouter()


def to_breakdown_schema(breakdown: PriceBreakdown) -> PriceBreakdownSchema:
    return PriceBreakdownSchema(
        months=breakdown.months,
        base_price=breakdown.base_price,
        base_price_with_commission=breakdown.base_price_with_commission,
        printing_charge=breakdown.printing_charge,
        mounting_charge=breakdown.mounting_charge,
        discount=breakdown.discount,
        subtotal=breakdown.subtotal,
        commission=breakdown.commission,
        gross_total=breakdown.gross_total,
        after_discount=breakdown.after_discount,
        tax=breakdown.tax,
        total=breakdown.total,
    )


@router.post("/pricing/quote", response_model=PriceBreakdownSchema)
def quote(req: PriceQuoteRequestSchema):
    overrides = req.model_dump(exclude={"start_date", "end_date"}, exclude_none=True)
    inputs = default_price_inputs(**overrides)
    if req.start_date is not None and req.end_date is not None:
        return to_breakdown_schema(compute_price_for_range(inputs, req.start_date, req.end_date))
    return to_breakdown_schema(compute_price(inputs))
