# app/api/v1/commission.py
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from app.core.commission import CommissionValidationError, calculate_commission
from app.core.commission_rates import (
    COMMISSION_RATES,
    MAX_AVERAGE_SALE_AMOUNT,
    MAX_SALES_COUNT,
    Party,
)
from app.schemas.commission import (
    CommissionBreakdown,
    ErrorOut,
    PartyRatesOut,
    RateScheduleOut,
    SalesInput,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/commission", tags=["commission"])


def error_response(code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorOut(error=code, message=message).model_dump(),
    )


@router.post(
    "",
    response_model=CommissionBreakdown,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorOut}},
)
def calculate(payload: Optional[SalesInput] = Body(default=None)):
    """
    Company vs competitor commission for the posted sales data.

    A missing or null body is answered by the calculator itself
    (INVALID_REQUEST), like any other validation failure.
    """
    result = calculate_commission(payload)

    if isinstance(result, CommissionValidationError):
        if payload is None:
            logger.warning("Commission request rejected: %s (no body)", result.code.value)
        else:
            logger.warning(
                "Commission request rejected: %s (local=%s foreign=%s)",
                result.code.value,
                payload.local_sales_count,
                payload.foreign_sales_count,
            )
        return error_response(result.code.value, result.message)

    logger.debug(
        "Commission calculated: local=%s foreign=%s company_total=%s competitor_total=%s",
        result.local_sales_count,
        result.foreign_sales_count,
        result.company_total_commission,
        result.competitor_total_commission,
    )
    return result


@router.get("/rates", response_model=RateScheduleOut)
def get_rate_schedule():
    """
    Fixed rate schedule and input limits, for display in the client.
    """
    company = COMMISSION_RATES[Party.COMPANY]
    competitor = COMMISSION_RATES[Party.COMPETITOR]
    return RateScheduleOut(
        company=PartyRatesOut(local_rate=company.local, foreign_rate=company.foreign),
        competitor=PartyRatesOut(local_rate=competitor.local, foreign_rate=competitor.foreign),
        max_sales_count=MAX_SALES_COUNT,
        max_average_sale_amount=MAX_AVERAGE_SALE_AMOUNT,
    )
