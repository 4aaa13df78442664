# app/core/commission_rates.py
from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal


class Party(str, enum.Enum):
    COMPANY = "COMPANY"
    COMPETITOR = "COMPETITOR"


@dataclass(frozen=True)
class PartyRates:
    local: Decimal
    foreign: Decimal


# Fixed schedule. Tests pin exact outputs, so these are not settings.
COMMISSION_RATES = {
    Party.COMPANY: PartyRates(local=Decimal("0.20"), foreign=Decimal("0.35")),
    Party.COMPETITOR: PartyRates(local=Decimal("0.02"), foreign=Decimal("0.0755")),
}

MAX_SALES_COUNT = 1_000_000
MAX_AVERAGE_SALE_AMOUNT = Decimal("1000000")
