from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from decimal import ROUND_CEILING, ROUND_FLOOR, Decimal, InvalidOperation
from typing import Any

from hoarding_booking.application.exceptions import ArithmeticInputError
from hoarding_booking.domain.entities.pricing import PriceBreakdown, PriceInputs

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HALF = Decimal("0.5")
DAYS_PER_BILLING_MONTH = 30


def parse_amount(value: Any) -> Decimal:
    """Strictly read a non-negative finite number."""
    if value is None:
        raise ArithmeticInputError("missing value")
    if isinstance(value, bool):
        raise ArithmeticInputError(f"boolean is not an amount: {value!r}")
    try:
        number = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError) as e:
        raise ArithmeticInputError(f"not a number: {value!r}") from e
    if not number.is_finite():
        raise ArithmeticInputError(f"not a finite number: {value!r}")
    if number < 0:
        raise ArithmeticInputError(f"negative amount: {value!r}")
    return number


def coerce_amount(value: Any) -> Decimal:
    try:
        return parse_amount(value)
    except ArithmeticInputError as e:
        if value is not None:
            logger.debug("Coercing pricing input to zero", extra={"error": str(e)})
        return ZERO


def coerce_months(value: Any) -> int:
    # Fractional months bill as the next whole month.
    try:
        number = parse_amount(value)
    except ArithmeticInputError:
        return 1
    return max(1, int(number.to_integral_value(rounding=ROUND_CEILING)))


def months_between(start: date, end: date) -> int:
    """Billable months for a rental: 30-day buckets, rounded up, at least one."""
    days = (end - start).days
    return max(1, -(-days // DAYS_PER_BILLING_MONTH))


def round_half_up(value: Decimal) -> int:
    # floor(x + 0.5): halves go toward positive infinity, matching the backend.
    return int((value + HALF).to_integral_value(rounding=ROUND_FLOOR))


def compute_price(inputs: PriceInputs) -> PriceBreakdown:
    months = coerce_months(inputs.months)
    unit_price = coerce_amount(inputs.unit_price_per_month)
    printing = coerce_amount(inputs.printing_charge)
    mounting = coerce_amount(inputs.mounting_charge)
    discount = coerce_amount(inputs.discount)
    commission_rate = coerce_amount(inputs.commission_rate)
    tax_rate = coerce_amount(inputs.tax_rate)

    base_price = unit_price * months
    subtotal = base_price + printing + mounting
    commission = subtotal * commission_rate
    gross_total = subtotal + commission
    after_discount = gross_total - discount
    tax = after_discount * tax_rate

    return PriceBreakdown(
        months=months,
        base_price=base_price,
        printing_charge=printing,
        mounting_charge=mounting,
        discount=discount,
        subtotal=subtotal,
        commission=commission,
        gross_total=gross_total,
        after_discount=after_discount,
        tax=tax,
        total=round_half_up(after_discount + tax),
    )


def compute_price_for_range(inputs: PriceInputs, start: date, end: date) -> PriceBreakdown:
    return compute_price(replace(inputs, months=months_between(start, end)))
