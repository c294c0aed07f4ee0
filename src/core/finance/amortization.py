# src/core/finance/amortization.py

from __future__ import annotations

from collections import defaultdict

from src.core.logs import get_logger
from src.schemas.models import LoanMonth, LoanSchedule, LoanYear, ProjectFinancialInput

logger = get_logger(__name__)


def loan_amount(total_cost: float, contribution: float, subsidy: float) -> float:
    """Term loan requirement: project cost net of promoter contribution and subsidy, floored at 0."""
    return max(total_cost - contribution - subsidy, 0.0)


def monthly_rate(annual_rate_pct: float) -> float:
    """Monthly rate as a fraction from an annual percent (12 -> 0.01)."""
    return annual_rate_pct / 12.0 / 100.0


def emi(principal: float, rate: float, months: float) -> float:
    """
    Level monthly installment for a fully-amortizing loan.

        EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Args:
        principal: Loan amount.
        rate: Monthly rate as a fraction.
        months: Number of monthly installments.

    Returns:
        The installment, or 0.0 unless principal, rate and months are all positive.
        When (1 + r)^n overflows a float the limit P * r is returned.
    """
    if principal <= 0 or rate <= 0 or months <= 0:
        return 0.0
    try:
        growth = (1.0 + rate) ** months
    except OverflowError:
        return principal * rate
    if growth <= 1.0:
        # rate below float resolution; straight-line limit
        return principal / months
    return principal * rate * growth / (growth - 1.0)


def monthly_schedule(principal: float, rate: float, installment: float, max_months: int) -> list[LoanMonth]:
    """
    Simulate repayment month by month.

    Each month interest accrues on the outstanding balance and the rest of the
    installment retires principal. The principal portion is clamped to the
    outstanding balance so the balance never goes negative, and the simulation
    stops as soon as the balance reaches zero even if months remain.
    """
    out: list[LoanMonth] = []
    bal = float(principal)
    for month in range(1, max_months + 1):
        if bal <= 0:
            break
        interest = bal * rate
        principal_paid = installment - interest
        if principal_paid > bal:
            principal_paid = bal
        closing = bal - principal_paid
        out.append(
            LoanMonth(
                month=month,
                year=(month - 1) // 12 + 1,
                opening_balance=bal,
                principal_paid=principal_paid,
                interest_paid=interest,
                closing_balance=closing,
            )
        )
        bal = closing
    return out


def annual_schedule(months: list[LoanMonth], principal: float, years: int) -> list[LoanYear]:
    """
    Roll monthly rows up into loan years 1..years.

    opening_principal is the balance before the year's payments, rebuilt from
    the year's closing balance plus the principal it retired. Years after payoff
    still get a row, with zero payments.
    """
    by_year: dict[int, list[LoanMonth]] = defaultdict(list)
    for m in months:
        by_year[m.year].append(m)

    out: list[LoanYear] = []
    bal = float(principal)
    for year in range(1, years + 1):
        rows = by_year.get(year, [])
        principal_paid = sum(m.principal_paid for m in rows)
        interest_paid = sum(m.interest_paid for m in rows)
        bal -= principal_paid
        out.append(
            LoanYear(
                year=year,
                opening_principal=bal + principal_paid,
                principal_paid=principal_paid,
                interest_paid=interest_paid,
            )
        )
    return out


def build_loan_schedule(fi: ProjectFinancialInput) -> LoanSchedule:
    """Size the term loan and split its repayment into months and years."""
    amount = loan_amount(fi.total_project_cost, fi.promoters_contribution, fi.subsidy)
    rate = monthly_rate(fi.rate_of_interest)
    term_months = fi.loan_tenure_years * 12.0
    installment = emi(amount, rate, term_months)

    if amount <= 0 or rate <= 0 or term_months <= 0:
        logger.debug("degenerate loan (amount=%s, rate=%s, months=%s): empty schedule", amount, rate, term_months)
        return LoanSchedule(loan_amount=amount, emi=installment, monthly_rate=rate, term_months=term_months)

    years = fi.horizon_years
    months = monthly_schedule(amount, rate, installment, years * 12)
    logger.debug("loan %.2f @ %.6f/month: emi=%.2f, %d monthly rows", amount, rate, installment, len(months))
    return LoanSchedule(
        loan_amount=amount,
        emi=installment,
        monthly_rate=rate,
        term_months=term_months,
        months=months,
        years=annual_schedule(months, amount, years),
    )
