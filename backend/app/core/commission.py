# app/core/commission.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

from app.core.commission_rates import (
    COMMISSION_RATES,
    MAX_AVERAGE_SALE_AMOUNT,
    MAX_SALES_COUNT,
    Party,
    PartyRates,
)
from app.schemas.commission import CommissionBreakdown, SalesInput

CENT = Decimal("0.01")


class CommissionErrorCode(str, enum.Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_LOCAL_COUNT = "INVALID_LOCAL_COUNT"
    INVALID_FOREIGN_COUNT = "INVALID_FOREIGN_COUNT"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    COUNT_TOO_LARGE = "COUNT_TOO_LARGE"
    AMOUNT_TOO_LARGE = "AMOUNT_TOO_LARGE"


ERROR_MESSAGES = {
    CommissionErrorCode.INVALID_REQUEST: "Request body cannot be null",
    CommissionErrorCode.INVALID_LOCAL_COUNT: "Local sales count must be greater than or equal to 0",
    CommissionErrorCode.INVALID_FOREIGN_COUNT: "Foreign sales count must be greater than or equal to 0",
    CommissionErrorCode.INVALID_AMOUNT: "Average sale amount must be greater than or equal to 0",
    CommissionErrorCode.COUNT_TOO_LARGE: "Sales count must not exceed 1,000,000",
    CommissionErrorCode.AMOUNT_TOO_LARGE: "Average sale amount must not exceed £1,000,000",
}


@dataclass(frozen=True)
class CommissionValidationError:
    code: CommissionErrorCode
    message: str

    @classmethod
    def of(cls, code: CommissionErrorCode) -> "CommissionValidationError":
        return cls(code=code, message=ERROR_MESSAGES[code])


CommissionResult = Union[CommissionBreakdown, CommissionValidationError]


def round2(value: Decimal) -> Decimal:
    """Currency rounding: 2 places, half away from zero (0.005 -> 0.01)."""
    rounded = value.quantize(CENT, rounding=ROUND_HALF_UP)
    # -0.00 (from a -0 amount) goes out as 0.00
    return rounded.copy_abs() if rounded.is_zero() else rounded


def validate_sales_input(sales: Optional[SalesInput]) -> Optional[CommissionValidationError]:
    """
    Ordered checks; the first failure wins.
    Zero is a valid lower bound and 1,000,000 a valid upper bound.
    """
    if sales is None:
        return CommissionValidationError.of(CommissionErrorCode.INVALID_REQUEST)

    if sales.local_sales_count < 0:
        return CommissionValidationError.of(CommissionErrorCode.INVALID_LOCAL_COUNT)

    if sales.foreign_sales_count < 0:
        return CommissionValidationError.of(CommissionErrorCode.INVALID_FOREIGN_COUNT)

    # NaN/Infinity would also break the comparisons below
    amount = sales.average_sale_amount
    if not amount.is_finite() or amount < 0:
        return CommissionValidationError.of(CommissionErrorCode.INVALID_AMOUNT)

    if sales.local_sales_count > MAX_SALES_COUNT or sales.foreign_sales_count > MAX_SALES_COUNT:
        return CommissionValidationError.of(CommissionErrorCode.COUNT_TOO_LARGE)

    if amount > MAX_AVERAGE_SALE_AMOUNT:
        return CommissionValidationError.of(CommissionErrorCode.AMOUNT_TOO_LARGE)

    return None


def _party_commission(
    *,
    rates: PartyRates,
    local_count: int,
    foreign_count: int,
    amount: Decimal,
) -> tuple[Decimal, Decimal, Decimal]:
    local = round2(local_count * amount * rates.local)
    foreign = round2(foreign_count * amount * rates.foreign)
    # leaves are rounded first so the total always equals what is displayed
    return local, foreign, round2(local + foreign)


def calculate_commission(sales: Optional[SalesInput]) -> CommissionResult:
    """
    Compute the company vs competitor commission breakdown.

    Pure and synchronous: returns a CommissionValidationError for bad input
    instead of raising, and never touches float.
    """
    error = validate_sales_input(sales)
    if error is not None:
        return error

    company_local, company_foreign, company_total = _party_commission(
        rates=COMMISSION_RATES[Party.COMPANY],
        local_count=sales.local_sales_count,
        foreign_count=sales.foreign_sales_count,
        amount=sales.average_sale_amount,
    )
    competitor_local, competitor_foreign, competitor_total = _party_commission(
        rates=COMMISSION_RATES[Party.COMPETITOR],
        local_count=sales.local_sales_count,
        foreign_count=sales.foreign_sales_count,
        amount=sales.average_sale_amount,
    )

    return CommissionBreakdown(
        company_local_commission=company_local,
        company_foreign_commission=company_foreign,
        company_total_commission=company_total,
        competitor_local_commission=competitor_local,
        competitor_foreign_commission=competitor_foreign,
        competitor_total_commission=competitor_total,
        local_sales_count=sales.local_sales_count,
        foreign_sales_count=sales.foreign_sales_count,
        average_sale_amount=sales.average_sale_amount,
    )
