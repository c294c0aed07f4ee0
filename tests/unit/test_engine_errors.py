# tests/unit/test_engine_errors.py

from __future__ import annotations

import logging

import pytest

from src.core.finance.errors import (
    FinancialComputationError,
    FinancialEngineError,
    classify_engine_error,
    engine_error_guard,
)


def test_classify_wraps_foreign_exceptions():
    err = classify_engine_error(ValueError("bad"), "dscr")
    assert isinstance(err, FinancialComputationError)
    assert isinstance(err, RuntimeError)
    assert err.stage == "dscr"
    assert "ValueError in dscr: bad" in str(err)


def test_classify_passes_engine_errors_through():
    original = FinancialComputationError("already typed", stage="costs")
    assert classify_engine_error(original) is original


def test_guard_chains_and_logs(caplog):
    caplog.set_level(logging.ERROR, logger="appraisal")
    with pytest.raises(FinancialComputationError) as info:
        with engine_error_guard("viability"):
            raise KeyError("year")

    assert isinstance(info.value.__cause__, KeyError)
    assert info.value.stage == "viability"
    assert any("viability" in r.getMessage() for r in caplog.records)


def test_guard_reraises_typed_errors_unchanged():
    original = FinancialComputationError("typed", stage="x")
    with pytest.raises(FinancialEngineError) as info:
        with engine_error_guard("y"):
            raise original
    assert info.value is original


def test_guard_is_silent_on_success():
    with engine_error_guard("costs"):
        value = 1 + 1
    assert value == 2
