# src/core/finance/depreciation.py

from __future__ import annotations

from src.core.logs import get_logger
from src.schemas.models import DepreciationYear

logger = get_logger(__name__)


def wdv_schedule(cost: float, rate: float, years: int) -> list[DepreciationYear]:
    """
    Written-down-value (reducing balance) depreciation.

    Year t depreciates its opening WDV at `rate` (a fraction); the closing WDV
    becomes the next year's opening WDV. Empty unless cost, rate and years are
    all positive.
    """
    if cost <= 0 or rate <= 0 or years <= 0:
        logger.debug("no depreciation (cost=%s, rate=%s, years=%s)", cost, rate, years)
        return []

    out: list[DepreciationYear] = []
    wdv = float(cost)
    for year in range(1, years + 1):
        amount = wdv * rate
        closing = wdv - amount
        out.append(DepreciationYear(year=year, opening_wdv=wdv, rate=rate, depreciation_amount=amount, closing_wdv=closing))
        wdv = closing
    return out
