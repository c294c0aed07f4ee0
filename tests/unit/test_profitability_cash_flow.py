# tests/unit/test_profitability_cash_flow.py

from __future__ import annotations

import pytest

from src.core.finance.cash_flow import derive_cash_flow
from src.core.finance.profitability import project_profitability
from src.schemas.models import DepreciationYear, LoanYear


def _loans() -> list[LoanYear]:
    return [
        LoanYear(year=1, opening_principal=1000.0, principal_paid=400.0, interest_paid=100.0),
        LoanYear(year=2, opening_principal=600.0, principal_paid=600.0, interest_paid=60.0),
    ]


def _deps() -> list[DepreciationYear]:
    return [DepreciationYear(year=1, opening_wdv=2000.0, rate=0.1, depreciation_amount=200.0, closing_wdv=1800.0)]


def test_geometric_growth_and_ebitda():
    rows = project_profitability(1000.0, 600.0, 0.10, 0.05, 3, [], [])
    assert [r.year for r in rows] == [1, 2, 3]
    assert rows[0].revenue == 1000.0
    assert rows[2].revenue == pytest.approx(1000.0 * 1.1**2)
    assert rows[2].expenses == pytest.approx(600.0 * 1.05**2)
    for r in rows:
        assert r.ebitda == pytest.approx(r.revenue - r.expenses)


def test_interest_and_depreciation_looked_up_by_year_with_zero_default():
    rows = project_profitability(1000.0, 600.0, 0.0, 0.0, 3, _loans(), _deps())

    assert (rows[0].interest, rows[0].depreciation) == (100.0, 200.0)
    assert rows[0].net_profit_before_tax == pytest.approx(400.0 - 100.0 - 200.0)
    # year 2: loan row exists, no depreciation row
    assert (rows[1].interest, rows[1].depreciation) == (60.0, 0.0)
    # year 3: neither schedule covers it
    assert (rows[2].interest, rows[2].depreciation) == (0.0, 0.0)
    assert rows[2].net_profit_before_tax == rows[2].ebitda


def test_zero_horizon_is_empty():
    assert project_profitability(1000.0, 600.0, 0.1, 0.1, 0, _loans(), _deps()) == []


def test_cash_accrual_is_ebitda_not_addback_sum():
    rows = project_profitability(1000.0, 600.0, 0.0, 0.0, 2, _loans(), _deps())
    flows = derive_cash_flow(rows)

    assert len(flows) == 2
    first = flows[0]
    assert first.net_profit == rows[0].net_profit_before_tax
    assert first.add_depreciation == 200.0
    assert first.add_interest == 100.0
    assert first.net_cash_accrual == rows[0].ebitda == 400.0
