# src/core/finance/costs.py

from __future__ import annotations

from src.schemas.models import CostBreakdownEntry, CostSummary, ProjectFinancialInput

# (field, display label) in report order
CAPITAL_COST_FIELDS: tuple[tuple[str, str], ...] = (
    ("machinery_equipment_cost", "Machinery & Equipment"),
    ("shed_building_cost", "Shed/Building"),
    ("land_cost", "Land"),
    ("furniture_fittings_cost", "Furniture & Fittings"),
    ("vehicle_cost", "Vehicle"),
    ("working_capital_cost", "Working Capital"),
    ("other_assets_cost", "Other Assets"),
)

PRELIMINARY_COST_FIELDS: tuple[tuple[str, str], ...] = (
    ("project_report_cost", "Project Report"),
    ("technical_know_how_cost", "Technical Know-How"),
    ("licensing_cost", "Licensing & Registration"),
    ("training_cost", "Training & Development"),
    ("interest_during_construction_cost", "Interest During Construction"),
    ("other_pre_operative_cost", "Other Pre-operative Expenses"),
)


def _amounts(fi: ProjectFinancialInput, fields: tuple[tuple[str, str], ...]) -> list[tuple[str, float]]:
    return [(label, float(getattr(fi, name))) for name, label in fields]


def cost_breakdown(items: list[tuple[str, float]]) -> list[CostBreakdownEntry]:
    """
    Percent breakdown of one cost group against that group's own total.

    Only strictly positive amounts are listed. With a non-positive total every
    listed entry reports 0%.
    """
    total = sum(amount for _, amount in items)
    return [
        CostBreakdownEntry(
            category=label,
            amount=amount,
            percentage=(amount / total * 100.0) if total > 0 else 0.0,
        )
        for label, amount in items
        if amount > 0
    ]


def total_capital_cost(fi: ProjectFinancialInput) -> float:
    return sum(amount for _, amount in _amounts(fi, CAPITAL_COST_FIELDS))


def total_preliminary_cost(fi: ProjectFinancialInput) -> float:
    return sum(amount for _, amount in _amounts(fi, PRELIMINARY_COST_FIELDS))


def aggregate_costs(fi: ProjectFinancialInput) -> CostSummary:
    """Sum and break down capital and preliminary/pre-operative costs."""
    capital = _amounts(fi, CAPITAL_COST_FIELDS)
    preliminary = _amounts(fi, PRELIMINARY_COST_FIELDS)
    capital_total = sum(a for _, a in capital)
    preliminary_total = sum(a for _, a in preliminary)
    return CostSummary(
        capital_breakdown=cost_breakdown(capital),
        preliminary_breakdown=cost_breakdown(preliminary),
        total_capital_cost=capital_total,
        total_preliminary_cost=preliminary_total,
        grand_total_cost=capital_total + preliminary_total,
    )
