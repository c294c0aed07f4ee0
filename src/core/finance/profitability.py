# src/core/finance/profitability.py

from __future__ import annotations

import math

from src.schemas.models import DepreciationYear, LoanYear, ProfitabilityYear

from .series import index_by_year, year_value


def _grow(val: float, rate: float, years: int) -> float:
    if val == 0:
        return 0.0
    try:
        return val * ((1.0 + (rate or 0.0)) ** years)
    except OverflowError:
        return math.copysign(math.inf, val)


def project_profitability(
    revenue: float,
    expenses: float,
    revenue_growth: float,
    expense_growth: float,
    years: int,
    loan_years: list[LoanYear],
    depreciation: list[DepreciationYear],
) -> list[ProfitabilityYear]:
    """
    Project annual profit before tax over `years`.

    Revenue and expenses compound from their Year 1 values (growth rates are
    fractions). Interest and depreciation are read from the loan and
    depreciation schedules by year, defaulting to 0.0 for years those schedules
    do not cover.
    """
    loans = index_by_year(loan_years)
    deps = index_by_year(depreciation)

    out: list[ProfitabilityYear] = []
    for y in range(1, years + 1):
        rev = _grow(revenue, revenue_growth, y - 1)
        exp = _grow(expenses, expense_growth, y - 1)
        ebitda = rev - exp
        interest = year_value(loans, y, "interest_paid")
        dep = year_value(deps, y, "depreciation_amount")
        out.append(
            ProfitabilityYear(
                year=y,
                revenue=rev,
                expenses=exp,
                ebitda=ebitda,
                interest=interest,
                depreciation=dep,
                net_profit_before_tax=ebitda - interest - dep,
            )
        )
    return out
