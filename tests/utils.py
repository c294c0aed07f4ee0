# tests/utils.py
"""
Single source of truth for test data and factories.
Update values here to cascade across the test suite.
"""

from __future__ import annotations

from typing import Any

from src.schemas.models import ProjectFinancialInput

# -----------------------------
# Canonical project (capture-layer field names, text values)
# -----------------------------

BASELINE_SNAPSHOT: dict[str, str] = {
    "totalProjectCost": "1575000",
    "promotersContribution": "76232",
    "subsidy": "434519",
    "rateOfInterest": "12",
    "loanTenureYears": "7",
    "moratoriumPeriodMonths": "0",
    "projectedAnnualRevenue": "1200000",
    "projectedAnnualExpenses": "826000",
    "depreciationRate": "10",
    "revenueGrowthRate": "10",
    "expenseGrowthRate": "8",
    # Capital costs: 1,450,000
    "machineryEquipmentCost": "200000",
    "shedBuildingCost": "300000",
    "landCost": "0",
    "furnitureFittingsCost": "150000",
    "vehicleCost": "400000",
    "workingCapitalCost": "300000",
    "otherAssetsCost": "100000",
    # Preliminary costs: 125,000
    "projectReportCost": "15000",
    "technicalKnowHowCost": "25000",
    "licensingCost": "20000",
    "trainingCost": "30000",
    "interestDuringConstructionCost": "25000",
    "otherPreOperativeCost": "10000",
}

BASELINE_CAPITAL_TOTAL = 1_450_000.0
BASELINE_PRELIMINARY_TOTAL = 125_000.0
BASELINE_GRAND_TOTAL = 1_575_000.0
BASELINE_LOAN = 1_064_249.0


def make_snapshot(**overrides: Any) -> dict[str, Any]:
    """Copy of the baseline snapshot with camelCase overrides applied."""
    data: dict[str, Any] = dict(BASELINE_SNAPSHOT)
    data.update(overrides)
    return data


def make_project_input(**overrides: Any) -> ProjectFinancialInput:
    """Parsed baseline input; overrides use snake_case field names."""
    fi = ProjectFinancialInput.from_mapping(BASELINE_SNAPSHOT)
    return fi.model_copy(update=overrides) if overrides else fi


def make_plain_loan_input(**overrides: Any) -> ProjectFinancialInput:
    """A minimal loan-only project: 120,000 borrowed at 12% over 1 year, no costs itemized."""
    base: dict[str, Any] = {
        "total_project_cost": 120_000.0,
        "rate_of_interest": 12.0,
        "loan_tenure_years": 1.0,
    }
    base.update(overrides)
    return ProjectFinancialInput(**base)
