# tests/unit/test_viability.py

from __future__ import annotations

import pytest

from src.core.finance.viability import (
    analyze_viability,
    grid_irr,
    npv,
    payback_period,
    present_value,
    profitability_index,
)


def test_npv_discounts_year_one_once():
    assert npv(1000.0, [1100.0], 0.10) == pytest.approx(0.0)
    assert present_value([110.0, 121.0], 0.10) == pytest.approx(200.0)


def test_grid_irr_returns_first_non_positive_rate():
    # exact IRR is 10.5% -> 0.11 is the first grid rate with NPV <= 0
    assert grid_irr(1000.0, [1105.0]) == pytest.approx(0.11)
    # exact IRR ≈ 9.5% -> first grid point at or above it
    assert grid_irr(1000.0, [1095.0]) == pytest.approx(0.10)


def test_grid_irr_zero_when_not_found():
    # NPV stays positive up to 100%
    assert grid_irr(100.0, [1000.0]) == 0.0


def test_grid_irr_first_step_when_npv_already_negative():
    assert grid_irr(1000.0, [100.0]) == pytest.approx(0.01)


def test_grid_irr_reaches_one_hundred_percent():
    # NPV(100%) = -1000 + 2000/2 = 0
    assert grid_irr(1000.0, [2000.0]) == pytest.approx(1.0)


def test_payback_first_year_cumulative_is_non_negative():
    assert payback_period(1000.0, [400.0, 400.0, 200.0, 500.0]) == 3
    assert payback_period(1000.0, [100.0, 100.0]) == 0
    assert payback_period(0.0, [0.0]) == 1


def test_profitability_index_guarded():
    assert profitability_index(1000.0, [1100.0], 0.10) == pytest.approx(1.0)
    assert profitability_index(0.0, [1100.0], 0.10) == 0.0


def test_analyze_viability_bundle():
    m = analyze_viability(1000.0, [500.0, 500.0, 500.0])
    assert m.discount_rate == 0.12
    assert m.npv == pytest.approx(-1000.0 + 500 / 1.12 + 500 / 1.12**2 + 500 / 1.12**3)
    assert m.payback_period_years == 2
    assert m.profitability_index == pytest.approx((m.npv + 1000.0) / 1000.0)
    # exact IRR ≈ 23.4%
    assert m.irr == pytest.approx(0.24)


def test_analyze_viability_empty_series():
    m = analyze_viability(1000.0, [])
    assert m.npv == -1000.0
    assert m.irr == pytest.approx(0.01)
    assert m.payback_period_years == 0
    assert m.profitability_index == 0.0


def test_long_horizon_discounting_stays_finite():
    # (1 + r)^t leaves float range for t > 1023 at r = 100%
    assert grid_irr(0.0, [1.0] * 1100) == 0.0
    assert present_value([1.0] * 1100, 1.0) == pytest.approx(1.0)
