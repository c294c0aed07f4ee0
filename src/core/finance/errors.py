# src/core/finance/errors.py
"""
Typed errors for the appraisal engine.

Bad numeric input never raises (it parses to zero and every division is
guarded). These types only surface internal defects: an exception escaping a
pipeline stage is normalized into FinancialComputationError, carrying the stage
name and chained to the original exception.

Exports
-------
- FinancialEngineError, FinancialComputationError
- ENGINE_ERRORS
- classify_engine_error(exc, stage)
- engine_error_guard(stage)
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from src.core.logs import get_logger

logger = get_logger(__name__)


class FinancialEngineError(RuntimeError):
    """Base class for appraisal engine failures."""


class FinancialComputationError(FinancialEngineError):
    """A pipeline stage failed on a programming defect, not on user input."""

    def __init__(self, message: str, *, stage: str | None = None) -> None:
        super().__init__(message)
        self.stage = stage


ENGINE_ERRORS = (FinancialComputationError,)


def classify_engine_error(exc: Exception, stage: str | None = None) -> FinancialEngineError:
    """Map an arbitrary exception raised inside a stage to a typed engine error."""
    if isinstance(exc, FinancialEngineError):
        return exc
    where = f" in {stage}" if stage else ""
    return FinancialComputationError(f"{type(exc).__name__}{where}: {exc}", stage=stage)


@contextmanager
def engine_error_guard(stage: str) -> Iterator[None]:
    """Normalize unexpected exceptions from a pipeline stage and log them."""
    try:
        yield
    except ENGINE_ERRORS:
        raise
    except Exception as exc:  # noqa: BLE001
        err = classify_engine_error(exc, stage)
        logger.error("computation failed at stage %s: %s", stage, exc)
        raise err from exc


__all__ = [
    "FinancialEngineError",
    "FinancialComputationError",
    "ENGINE_ERRORS",
    "classify_engine_error",
    "engine_error_guard",
]
