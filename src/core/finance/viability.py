# src/core/finance/viability.py
"""
Investment viability metrics over an annual accrual series.

Conventions
-----------
- accruals[0] is Year 1 and is discounted by (1 + d)^1; the initial investment
  sits at time 0 undiscounted.
- IRR is a coarse grid search, not a root finder: trial rates 1%, 2%, ... 100%,
  returning the first rate whose NPV is <= 0 (0.0 when none is).
"""

from __future__ import annotations

from collections.abc import Sequence

from src.schemas.models import ViabilityMetrics

DEFAULT_DISCOUNT_RATE = 0.12
IRR_GRID_STEPS = 100  # 1% .. 100% in whole points


def _discount(amount: float, rate: float, t: int) -> float:
    try:
        return amount / ((1.0 + rate) ** t)
    except OverflowError:
        # factor past float range: the term is negligible
        return 0.0


def present_value(accruals: Sequence[float], rate: float) -> float:
    """Sum of accruals discounted at `rate`, Year 1 discounted once."""
    return float(sum(_discount(a, rate, t) for t, a in enumerate(accruals, start=1)))


def npv(initial_investment: float, accruals: Sequence[float], rate: float) -> float:
    return -initial_investment + present_value(accruals, rate)


def grid_irr(initial_investment: float, accruals: Sequence[float]) -> float:
    """First grid rate at which NPV turns non-positive; 0.0 if NPV stays positive up to 100%."""
    for step in range(1, IRR_GRID_STEPS + 1):
        rate = step / 100.0
        if npv(initial_investment, accruals, rate) <= 0:
            return rate
    return 0.0


def payback_period(initial_investment: float, accruals: Sequence[float]) -> int:
    """First year in which cumulative (undiscounted) accruals recover the investment; 0 if never."""
    cumulative = -initial_investment
    for t, a in enumerate(accruals, start=1):
        cumulative += a
        if cumulative >= 0:
            return t
    return 0


def profitability_index(initial_investment: float, accruals: Sequence[float], rate: float) -> float:
    if initial_investment <= 0:
        return 0.0
    return present_value(accruals, rate) / initial_investment


def analyze_viability(
    initial_investment: float, accruals: Sequence[float], *, discount_rate: float = DEFAULT_DISCOUNT_RATE
) -> ViabilityMetrics:
    series = [float(a) for a in accruals]
    return ViabilityMetrics(
        npv=npv(initial_investment, series, discount_rate),
        irr=grid_irr(initial_investment, series),
        payback_period_years=payback_period(initial_investment, series),
        profitability_index=profitability_index(initial_investment, series, discount_rate),
        discount_rate=discount_rate,
    )
