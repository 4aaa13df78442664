# app/schemas/commission.py
from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, PlainSerializer, StrictInt, field_validator
from pydantic.alias_generators import to_camel

# Decimal in Python, plain number on the wire (the client calls .toFixed(2) on it).
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class SalesInput(CamelModel):
    """
    Sales data posted by the calculator form.
    Sign and range checks live in app.core.commission so they are reported
    with their own error codes, in a fixed order.
    """
    # strict: JSON true/false or "10" are not counts
    local_sales_count: StrictInt
    foreign_sales_count: StrictInt
    average_sale_amount: Money

    @field_validator("average_sale_amount", mode="before")
    @classmethod
    def _number_only(cls, v: Any) -> Any:
        # strings could carry more digits than the float echo keeps
        if isinstance(v, (bool, str)):
            raise ValueError("must be a number")
        # 123.45 -> Decimal("123.45"), not the binary expansion of the float
        if isinstance(v, float):
            return Decimal(str(v))
        return v

    @field_validator("average_sale_amount")
    @classmethod
    def _unsigned_zero(cls, v: Decimal) -> Decimal:
        return v.copy_abs() if v.is_zero() else v


class CommissionBreakdown(CamelModel):
    company_local_commission: Money
    company_foreign_commission: Money
    company_total_commission: Money

    competitor_local_commission: Money
    competitor_foreign_commission: Money
    competitor_total_commission: Money

    # echo of the input
    local_sales_count: int
    foreign_sales_count: int
    average_sale_amount: Money


class ErrorOut(BaseModel):
    error: str
    message: str


class PartyRatesOut(CamelModel):
    local_rate: Money
    foreign_rate: Money


class RateScheduleOut(CamelModel):
    company: PartyRatesOut
    competitor: PartyRatesOut
    max_sales_count: int
    max_average_sale_amount: Money
