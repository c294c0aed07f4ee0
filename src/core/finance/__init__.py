# src/core/finance/__init__.py

from .amortization import (
    build_loan_schedule,
    emi,
    loan_amount,
)
from .costs import aggregate_costs
from .depreciation import wdv_schedule
from .engine import run_financial_model
from .errors import FinancialComputationError, FinancialEngineError
from .viability import analyze_viability, grid_irr

__all__ = [
    "run_financial_model",
    "aggregate_costs",
    "build_loan_schedule",
    "emi",
    "loan_amount",
    "wdv_schedule",
    "analyze_viability",
    "grid_irr",
    "FinancialEngineError",
    "FinancialComputationError",
]
