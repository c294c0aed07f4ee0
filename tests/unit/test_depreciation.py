# tests/unit/test_depreciation.py

from __future__ import annotations

import pytest

from src.core.finance.depreciation import wdv_schedule


def test_first_year_on_baseline_cost():
    sched = wdv_schedule(1_575_000.0, 0.10, 7)
    assert sched[0].opening_wdv == 1_575_000.0
    assert sched[0].depreciation_amount == pytest.approx(157_500.0)
    assert sched[0].closing_wdv == pytest.approx(1_417_500.0)
    assert sched[0].rate == 0.10


def test_schedule_is_chained_and_reducing():
    sched = wdv_schedule(1_575_000.0, 0.10, 7)
    assert [d.year for d in sched] == list(range(1, 8))
    for d in sched:
        assert d.closing_wdv == pytest.approx(d.opening_wdv * (1 - 0.10))
    for prev, cur in zip(sched, sched[1:], strict=False):
        assert cur.opening_wdv == prev.closing_wdv


@pytest.mark.parametrize(("cost", "rate", "years"), [(0.0, 0.1, 7), (-1.0, 0.1, 7), (1000.0, 0.0, 7), (1000.0, 0.1, 0)])
def test_empty_when_any_driver_non_positive(cost, rate, years):
    assert wdv_schedule(cost, rate, years) == []
