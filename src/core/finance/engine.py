# src/core/finance/engine.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from src.core.logs import get_logger
from src.schemas.models import CalculatedResults, CostSummary, ProjectFinancialInput

from .amortization import build_loan_schedule
from .balance_sheet import project_balance_sheet
from .cash_flow import derive_cash_flow
from .costs import aggregate_costs
from .depreciation import wdv_schedule
from .dscr import evaluate_dscr
from .errors import engine_error_guard
from .profitability import project_profitability
from .viability import DEFAULT_DISCOUNT_RATE, analyze_viability

logger = get_logger(__name__)


def initial_investment(fi: ProjectFinancialInput, costs: CostSummary) -> float:
    """
    Investment base for viability metrics.

    The capture layer keeps total_project_cost equal to the itemized grand
    total; when it was left blank the itemized grand total stands in.
    """
    if fi.total_project_cost > 0:
        return fi.total_project_cost
    return costs.grand_total_cost


def run_financial_model(
    inputs: ProjectFinancialInput | Mapping[str, Any],
    *,
    discount_rate: float = DEFAULT_DISCOUNT_RATE,
) -> CalculatedResults:
    """
    Compute every statement and metric for one input snapshot.

    Pure and idempotent: no state is kept between calls, so the caller simply
    re-runs it on every input change. Raw mappings (numeric-as-text fields) are
    parsed with zero defaults first.
    """
    fi = inputs if isinstance(inputs, ProjectFinancialInput) else ProjectFinancialInput.from_mapping(inputs)
    years = fi.horizon_years

    with engine_error_guard("costs"):
        costs = aggregate_costs(fi)

    with engine_error_guard("amortization"):
        loan = build_loan_schedule(fi)

    with engine_error_guard("depreciation"):
        depreciation = wdv_schedule(fi.total_project_cost, fi.depreciation_rate / 100.0, years)

    with engine_error_guard("profitability"):
        profitability = project_profitability(
            fi.projected_annual_revenue,
            fi.projected_annual_expenses,
            fi.revenue_growth_rate / 100.0,
            fi.expense_growth_rate / 100.0,
            years,
            loan.years,
            depreciation,
        )

    with engine_error_guard("cash_flow"):
        cash_flow = derive_cash_flow(profitability)

    with engine_error_guard("dscr"):
        dscr = evaluate_dscr(cash_flow, loan.years, years)

    with engine_error_guard("balance_sheet"):
        balance_sheet = project_balance_sheet(
            fi.total_project_cost,
            fi.promoters_contribution,
            loan.loan_amount,
            years,
            depreciation,
            loan.years,
            profitability,
        )

    with engine_error_guard("viability"):
        viability = analyze_viability(
            initial_investment(fi, costs),
            [row.net_cash_accrual for row in cash_flow],
            discount_rate=discount_rate,
        )

    logger.debug(
        "appraisal done: loan=%.2f emi=%.2f years=%d avg_dscr=%.3f npv=%.2f irr=%.2f",
        loan.loan_amount,
        loan.emi,
        years,
        dscr.average,
        viability.npv,
        viability.irr,
    )

    return CalculatedResults(
        loan_amount=loan.loan_amount,
        emi=loan.emi,
        costs=costs,
        loan_schedule=loan,
        depreciation_schedule=depreciation,
        profitability=profitability,
        cash_flow=cash_flow,
        dscr=dscr,
        balance_sheet=balance_sheet,
        viability=viability,
    )
