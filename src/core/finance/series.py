# src/core/finance/series.py
"""
Year-indexed lookups with explicit defaults.

Schedules can be shorter than the projection horizon (no loan, no
depreciation, early payoff). Every "this year's value or a default" read goes
through year_value() so the substitution is visible at the call site.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol, TypeVar


class _HasYear(Protocol):
    year: int


RowT = TypeVar("RowT", bound=_HasYear)

MISSING_YEAR_DEFAULT = 0.0


def index_by_year(rows: Iterable[RowT]) -> dict[int, RowT]:
    """Map year -> row. Later rows win if a year repeats."""
    return {row.year: row for row in rows}


def year_value(index: dict[int, RowT], year: int, field: str, default: float = MISSING_YEAR_DEFAULT) -> float:
    """Return `field` of the row for `year`, or `default` when that year has no row."""
    row = index.get(year)
    if row is None:
        return default
    return float(getattr(row, field))
