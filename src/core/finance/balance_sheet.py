# src/core/finance/balance_sheet.py

from __future__ import annotations

from src.schemas.models import BalanceSheetYear, DepreciationYear, LoanYear, ProfitabilityYear

from .series import index_by_year, year_value

# Working-capital heuristics: not an accounting rule, kept for report parity.
CURRENT_ASSETS_RATIO = 0.20
CURRENT_ASSETS_FLOOR = 50_000.0
CURRENT_LIABILITIES_RATIO = 0.10
CURRENT_LIABILITIES_FLOOR = 25_000.0


def project_balance_sheet(
    total_cost: float,
    contribution: float,
    initial_loan: float,
    years: int,
    depreciation: list[DepreciationYear],
    loan_years: list[LoanYear],
    profitability: list[ProfitabilityYear],
) -> list[BalanceSheetYear]:
    """
    Simplified year-end balance sheet.

    - Fixed assets: closing WDV (total project cost when the year has no depreciation row).
    - Current assets / liabilities: ratio of fixed / total assets with absolute floors.
    - Equity: promoter contribution plus cumulative profit before tax.
    - Long-term liabilities: initial loan less cumulative principal repaid.

    Total liabilities are NOT reconciled to total assets.
    """
    deps = index_by_year(depreciation)
    loans = index_by_year(loan_years)
    profits = index_by_year(profitability)

    out: list[BalanceSheetYear] = []
    accumulated_profit = 0.0
    repaid = 0.0
    for y in range(1, years + 1):
        fixed = year_value(deps, y, "closing_wdv", default=total_cost)
        current_assets = max(fixed * CURRENT_ASSETS_RATIO, CURRENT_ASSETS_FLOOR)
        total_assets = fixed + current_assets

        accumulated_profit += year_value(profits, y, "net_profit_before_tax")
        equity = contribution + accumulated_profit

        repaid += year_value(loans, y, "principal_paid")
        long_term = initial_loan - repaid

        current_liabilities = max(total_assets * CURRENT_LIABILITIES_RATIO, CURRENT_LIABILITIES_FLOOR)
        out.append(
            BalanceSheetYear(
                year=y,
                fixed_assets=fixed,
                current_assets=current_assets,
                total_assets=total_assets,
                owners_equity=equity,
                long_term_liabilities=long_term,
                current_liabilities=current_liabilities,
                total_liabilities=equity + long_term + current_liabilities,
            )
        )
    return out
