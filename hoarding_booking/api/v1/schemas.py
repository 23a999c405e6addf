from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator


class PriceQuoteRequestSchema(BaseModel):
    unit_price_per_month: Decimal | None = None
    months: Decimal | None = None
    start_date: date | None = None
    end_date: date | None = None
    discount: Decimal | None = None
    printing_charge: Decimal | None = None
    mounting_charge: Decimal | None = None
    commission_rate: Decimal | None = None
    tax_rate: Decimal | None = None

    @model_validator(mode="after")
    def check_range(self) -> "PriceQuoteRequestSchema":
        if (self.start_date is None) != (self.end_date is None):
            raise ValueError("start_date and end_date must be given together")
        return self


class PriceBreakdownSchema(BaseModel):
    months: int
    base_price: Decimal
    base_price_with_commission: Decimal
    printing_charge: Decimal
    mounting_charge: Decimal
    discount: Decimal
    subtotal: Decimal
    commission: Decimal
    gross_total: Decimal
    after_discount: Decimal
    tax: Decimal
    total: int


class DayFlagsSchema(BaseModel):
    day: date
    padding: bool
    today: bool
    past: bool
    booked: bool
    before_lead_time: bool
    disabled: bool


class MonthSchema(BaseModel):
    month_key: str
    weeks: list[list[DayFlagsSchema]]


class MonthsResponseSchema(BaseModel):
    item_id: str
    months: list[MonthSchema]
    booked_ranges: list[tuple[date, date]] = Field(default_factory=list)


class SelectionRequestSchema(BaseModel):
    start_date: date
    end_date: date


class SelectionResponseSchema(BaseModel):
    item_id: str
    accepted: bool
    start_date: date | None = None
    end_date: date | None = None
    days: int | None = None
    rejection: str | None = None
