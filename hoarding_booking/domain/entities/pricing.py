from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PriceInputs:
    # Raw values as received from the host; coerced at calculation time.
    unit_price_per_month: Any = 0
    months: Any = 1
    discount: Any = 0
    printing_charge: Any = 0
    mounting_charge: Any = 0
    commission_rate: Any = Decimal("0.15")
    tax_rate: Any = Decimal("0.18")


@dataclass(frozen=True)
class PriceBreakdown:
    months: int
    base_price: Decimal  # unit_price_per_month * months
    printing_charge: Decimal
    mounting_charge: Decimal
    discount: Decimal
    subtotal: Decimal
    commission: Decimal
    gross_total: Decimal
    after_discount: Decimal
    tax: Decimal
    total: int

    @property
    def base_price_with_commission(self) -> Decimal:
        """Display row: rental price plus commission, without printing and mounting."""
        return self.base_price + self.commission
