# src/core/finance/cash_flow.py

from __future__ import annotations

from src.schemas.models import CashFlowYear, ProfitabilityYear


def derive_cash_flow(profitability: list[ProfitabilityYear]) -> list[CashFlowYear]:
    """
    Map profitability rows to cash accruals.

    net_cash_accrual is EBITDA, not net profit plus the add-backs. The add-back
    fields are carried for display only; DSCR and viability read the accrual.
    """
    return [
        CashFlowYear(
            year=p.year,
            net_profit=p.net_profit_before_tax,
            add_depreciation=p.depreciation,
            add_interest=p.interest,
            net_cash_accrual=p.ebitda,
        )
        for p in profitability
    ]
