# src/schemas/models.py

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Leading numeric prefix, e.g. "12.5%" -> 12.5, "  7 years" -> 7.0
_NUMBER_PREFIX = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_number(value: Any) -> float:
    """
    Parse a numeric-as-text field into a float, defaulting to 0.0.

    Rules:
      - None, empty strings and unparsable text -> 0.0
      - Booleans are not numbers here -> 0.0
      - A leading numeric prefix is honoured ("12.5%" -> 12.5)
      - ASCII digits only; "_" and "," end the number ("1_000" -> 1.0)
      - NaN and +/-inf -> 0.0

    Never raises.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        out = float(value)
    else:
        text = str(value).strip()
        if not text:
            return 0.0
        m = _NUMBER_PREFIX.match(text)
        if not m:
            return 0.0
        out = float(m.group(0))
    return out if math.isfinite(out) else 0.0


# =========================
# Core inputs
# =========================


class ProjectFinancialInput(BaseModel):
    """
    Immutable numeric snapshot of one project's financing inputs.

    Every field originates as text from the capture layer and is parsed with
    parse_number(); missing or malformed values become 0.0. Rates are entered
    as percents (12 = 12%). Field names are snake_case; the capture layer's
    camelCase names (e.g. "totalProjectCost") are accepted as aliases.
    """

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True, alias_generator=to_camel)

    # Financing
    total_project_cost: float = Field(0.0, description="Total project cost; seeds depreciation and sizes the loan.")
    promoters_contribution: float = Field(0.0, description="Promoter's own contribution (equity).")
    subsidy: float = Field(0.0, description="Capital subsidy reducing the loan requirement.")
    rate_of_interest: float = Field(0.0, description="Annual interest rate in percent (12 = 12%).")
    loan_tenure_years: float = Field(0.0, description="Loan tenure in years; also the projection horizon.")
    moratorium_period_months: float = Field(
        0.0, description="Moratorium period captured with the application. Carried for reporting, not applied."
    )

    # Operations
    projected_annual_revenue: float = Field(0.0, description="Year 1 revenue.")
    projected_annual_expenses: float = Field(0.0, description="Year 1 operating expenses (excl. interest/depreciation).")
    depreciation_rate: float = Field(0.0, description="Annual written-down-value depreciation rate in percent.")
    revenue_growth_rate: float = Field(0.0, description="Annual revenue growth in percent.")
    expense_growth_rate: float = Field(0.0, description="Annual expense growth in percent.")

    # Capital costs
    machinery_equipment_cost: float = 0.0
    shed_building_cost: float = 0.0
    land_cost: float = 0.0
    furniture_fittings_cost: float = 0.0
    vehicle_cost: float = 0.0
    working_capital_cost: float = 0.0
    other_assets_cost: float = 0.0

    # Preliminary & pre-operative costs
    project_report_cost: float = 0.0
    technical_know_how_cost: float = 0.0
    licensing_cost: float = 0.0
    training_cost: float = 0.0
    interest_during_construction_cost: float = 0.0
    other_pre_operative_cost: float = 0.0

    @field_validator("*", mode="before")
    @classmethod
    def _zero_default(cls, v: Any) -> float:
        return parse_number(v)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> ProjectFinancialInput:
        """Build a snapshot from a flat mapping of (possibly textual) fields. Unknown keys are ignored."""
        return cls.model_validate(dict(data or {}))

    @property
    def annual_rate(self) -> float:
        """Annual interest rate as a fraction."""
        return self.rate_of_interest / 100.0

    @property
    def horizon_years(self) -> int:
        """Whole years of tenure; drives every yearly schedule."""
        return int(self.loan_tenure_years) if self.loan_tenure_years > 0 else 0


# =========================
# Computed outputs
# =========================


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True)


class CostBreakdownEntry(_Row):
    category: str = Field(..., description="Display label of the cost line.")
    amount: float = Field(..., description="Cost amount (> 0).")
    percentage: float = Field(..., description="Share of the group's total, in percent (0 when total ≤ 0).")


class CostSummary(_Row):
    """Capital and preliminary cost totals with per-group breakdowns."""

    capital_breakdown: list[CostBreakdownEntry] = Field(default_factory=list)
    preliminary_breakdown: list[CostBreakdownEntry] = Field(default_factory=list)
    total_capital_cost: float = 0.0
    total_preliminary_cost: float = 0.0
    grand_total_cost: float = Field(0.0, description="Capital + preliminary costs.")


class DepreciationYear(_Row):
    year: int = Field(..., description="Year index starting at 1.")
    opening_wdv: float = Field(..., description="Written-down value at the start of the year.")
    rate: float = Field(..., description="Depreciation rate as a fraction (0.10 = 10%).")
    depreciation_amount: float
    closing_wdv: float = Field(..., description="Written-down value after this year's depreciation.")


class LoanMonth(_Row):
    month: int = Field(..., description="Month index starting at 1.")
    year: int = Field(..., description="Loan year owning this month (1-based).")
    opening_balance: float
    principal_paid: float
    interest_paid: float
    closing_balance: float


class LoanYear(_Row):
    year: int
    opening_principal: float = Field(..., description="Outstanding principal before this year's payments.")
    principal_paid: float
    interest_paid: float


class LoanSchedule(_Row):
    """Term loan sizing plus month-level and year-level repayment splits."""

    loan_amount: float = 0.0
    emi: float = Field(0.0, description="Level monthly installment (0 for degenerate loans).")
    monthly_rate: float = 0.0
    term_months: float = 0.0
    months: list[LoanMonth] = Field(default_factory=list)
    years: list[LoanYear] = Field(default_factory=list)


class ProfitabilityYear(_Row):
    year: int
    revenue: float
    expenses: float
    ebitda: float = Field(..., description="Revenue − expenses, before interest and depreciation.")
    interest: float
    depreciation: float
    net_profit_before_tax: float


class CashFlowYear(_Row):
    """
    Cash accrual row. The add-back fields are kept for display; net_cash_accrual
    is EBITDA and is the figure every downstream metric consumes.
    """

    year: int
    net_profit: float
    add_depreciation: float
    add_interest: float
    net_cash_accrual: float


class DSCRYear(_Row):
    year: int
    net_cash_accrual: float
    debt_obligation: float = Field(..., description="Principal + interest due in the year.")
    dscr: float = Field(..., description="Accrual / obligation; 0 when there is no obligation.")


class DSCRSummary(_Row):
    per_year: list[DSCRYear] = Field(default_factory=list)
    average: float = Field(0.0, description="Mean DSCR over years with a positive debt obligation.")


class BalanceSheetYear(_Row):
    """Heuristic projected balance sheet row. Assets and liabilities are not forced to balance."""

    year: int
    fixed_assets: float
    current_assets: float
    total_assets: float
    owners_equity: float
    long_term_liabilities: float
    current_liabilities: float
    total_liabilities: float


class ViabilityMetrics(_Row):
    npv: float = 0.0
    irr: float = Field(0.0, description="Coarse IRR on a 1-point grid (0.07 = 7%); 0 when not found up to 100%.")
    payback_period_years: int = Field(0, description="First year cumulative accruals recover the investment; 0 if never.")
    profitability_index: float = 0.0
    discount_rate: float = 0.12


class CalculatedResults(_Row):
    """Full appraisal output for one input snapshot."""

    loan_amount: float
    emi: float
    costs: CostSummary
    loan_schedule: LoanSchedule
    depreciation_schedule: list[DepreciationYear] = Field(default_factory=list)
    profitability: list[ProfitabilityYear] = Field(default_factory=list)
    cash_flow: list[CashFlowYear] = Field(default_factory=list)
    dscr: DSCRSummary = Field(default_factory=DSCRSummary)
    balance_sheet: list[BalanceSheetYear] = Field(default_factory=list)
    viability: ViabilityMetrics = Field(default_factory=ViabilityMetrics)
