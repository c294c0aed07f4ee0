# src/core/finance/dscr.py

from __future__ import annotations

from src.schemas.models import CashFlowYear, DSCRSummary, DSCRYear, LoanYear

from .series import index_by_year, year_value


def evaluate_dscr(cash_flow: list[CashFlowYear], loan_years: list[LoanYear], years: int) -> DSCRSummary:
    """
    Debt-service coverage per year and on average.

    A year with no debt obligation reports dscr 0.0 and is left out of the
    average; the average is 0.0 when no year carries an obligation.
    """
    accruals = index_by_year(cash_flow)
    loans = index_by_year(loan_years)

    rows: list[DSCRYear] = []
    covered: list[float] = []
    for y in range(1, years + 1):
        accrual = year_value(accruals, y, "net_cash_accrual")
        obligation = year_value(loans, y, "principal_paid") + year_value(loans, y, "interest_paid")
        dscr = 0.0
        if obligation > 0:
            dscr = accrual / obligation
            covered.append(dscr)
        rows.append(DSCRYear(year=y, net_cash_accrual=accrual, debt_obligation=obligation, dscr=dscr))

    average = sum(covered) / len(covered) if covered else 0.0
    return DSCRSummary(per_year=rows, average=average)
