# tests/conftest.py
from __future__ import annotations

import pytest

from src.core.finance import run_financial_model
from tests.utils import make_project_input, make_snapshot


# -------- Input fixtures --------
@pytest.fixture
def baseline_input():
    """Factory for the canonical parsed input (snake_case overrides)."""

    def _factory(**overrides):
        return make_project_input(**overrides)

    return _factory


@pytest.fixture
def baseline_snapshot():
    """Factory for the canonical raw snapshot (camelCase overrides)."""

    def _factory(**overrides):
        return make_snapshot(**overrides)

    return _factory


# -------- Result fixtures --------
@pytest.fixture
def baseline_results():
    """Factory to run the engine on provided inputs (defaults to the baseline project)."""

    def _factory(fi=None, *, discount_rate=None):
        if fi is None:
            fi = make_project_input()
        if discount_rate is None:
            return run_financial_model(fi)
        return run_financial_model(fi, discount_rate=discount_rate)

    return _factory


@pytest.fixture(autouse=True)
def _clean_appraisal_env(monkeypatch):
    for key in ("APPRAISAL_OUT", "APPRAISAL_DISCOUNT_RATE", "APPRAISAL_LOG_LEVEL", "APPRAISAL_DEBUG"):
        monkeypatch.delenv(key, raising=False)
    yield
