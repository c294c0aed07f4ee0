# src/inputs/inputs.py
"""
Inputs loader for the project loan appraisal engine.

Goals
-----
- File-first inputs: the capture layer hands over a JSON snapshot.
- Accept both the flat snapshot (field -> numeric-as-text) and a structured
  shape that adds run options.
- Minimal environment-variable overrides for CI/CLI convenience.

Supported JSON shapes
---------------------
1) Flat (root = input snapshot)
   {"totalProjectCost": "1575000", "rateOfInterest": "12", ...}

2) Structured
   {
     "inputs": { ... snapshot ... },
     "run": {"out": "appraisal_results.json", "discount_rate": 0.12, "log_level": "INFO"}
   }

Environment overrides (optional)
--------------------------------
- APPRAISAL_OUT            -> RunOptions.out
- APPRAISAL_DISCOUNT_RATE  -> RunOptions.discount_rate (float in (0, 1])
- APPRAISAL_LOG_LEVEL      -> RunOptions.log_level

Notes
-----
- Snapshot fields are never rejected: malformed numbers parse to 0 inside
  ProjectFinancialInput. Only run options are validated strictly.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, Field, ValidationError

from src.schemas.models import ProjectFinancialInput

# ----------------------------
# Pydantic models for structured inputs
# ----------------------------


class RunOptions(BaseModel):
    """Runtime (non-financial) options controlling one appraisal run."""

    out: str = Field("appraisal_results.json", description="Path to write the JSON results.")
    discount_rate: float = Field(0.12, gt=0, le=1, description="Discount rate for NPV and profitability index.")
    log_level: str = Field("INFO", description="Logging level name.")


class AppInputs(BaseModel):
    """
    Full input payload.

    Attributes:
        inputs: The parsed input snapshot consumed by the engine.
        run:    Non-financial, runtime options for the current execution.
    """

    inputs: ProjectFinancialInput
    run: RunOptions = RunOptions()


# ----------------------------
# Loader
# ----------------------------


@dataclass(frozen=True)
class InputsLoader:
    """
    File-first inputs loader with light env overrides.

    Default search (when path=None):
        1) ./data/sample/inputs.json
        2) ./config.json
    """

    env_prefix: str = "APPRAISAL_"

    # ---------- Public API ----------

    def load(self, path: str | Path | None = None) -> AppInputs:
        """Load inputs from a JSON file (path). If path is None, try defaults."""
        p = self._resolve_path(path)
        raw = self._read_json_file(p)
        cfg = self._parse_root(self._wrap_flat(raw))
        return self._apply_env_overrides(cfg)

    def load_json(self, text: str) -> AppInputs:
        """Load inputs from a JSON string (flat or structured)."""
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON payload: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError("Inputs payload must be a JSON object.")
        cfg = self._parse_root(self._wrap_flat(raw))
        return self._apply_env_overrides(cfg)

    def with_overrides(
        self,
        cfg: AppInputs,
        *,
        out: str | None = None,
        discount_rate: float | None = None,
        log_level: str | None = None,
    ) -> AppInputs:
        """
        Return a *new* AppInputs with provided non-null overrides applied to RunOptions.
        Overrides are validated like file values.
        """
        updates: dict[str, Any] = {}
        if out is not None:
            updates["out"] = out
        if discount_rate is not None:
            updates["discount_rate"] = discount_rate
        if log_level is not None:
            updates["log_level"] = log_level

        if not updates:
            return cfg

        try:
            run_new = RunOptions.model_validate({**cfg.run.model_dump(), **updates})
        except ValidationError as e:
            raise ValueError(f"Invalid run options:\n{e}") from e
        return cfg.model_copy(update={"run": run_new})

    # ---------- Internals ----------

    def _resolve_path(self, path: str | Path | None) -> Path:
        if path is not None:
            p = Path(path)
            if not p.exists():
                raise FileNotFoundError(f"Inputs file not found: {p}")
            return p

        for candidate in (Path("data/sample/inputs.json"), Path("config.json")):
            if candidate.exists():
                return candidate
        raise FileNotFoundError(
            "No inputs path provided and no default inputs found. Looked for ./data/sample/inputs.json and ./config.json."
        )

    def _read_json_file(self, p: Path) -> dict[str, Any]:
        if p.suffix.lower() != ".json":
            raise ValueError(f"Unsupported inputs format for {p.name}; only .json is supported.")
        try:
            data = json.loads(p.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {p}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Inputs in {p} must be a JSON object.")
        return cast(dict[str, Any], data)

    def _wrap_flat(self, raw: dict[str, Any]) -> dict[str, Any]:
        """Flat snapshots become {"inputs": raw}; structured payloads pass through."""
        if "inputs" in raw and isinstance(raw["inputs"], dict):
            return raw
        return {"inputs": raw}

    def _parse_root(self, data: dict[str, Any]) -> AppInputs:
        try:
            return AppInputs.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Inputs validation failed:\n{e}") from e

    def _apply_env_overrides(self, cfg: AppInputs) -> AppInputs:
        """Apply light, optional overrides from environment variables to run options."""
        prefix = self.env_prefix
        updates: dict[str, Any] = {}

        out = os.getenv(f"{prefix}OUT")
        if out:
            updates["out"] = out

        rate = os.getenv(f"{prefix}DISCOUNT_RATE")
        if rate:
            try:
                value = float(rate)
                if 0 < value <= 1:
                    updates["discount_rate"] = value
            except ValueError:
                # Ignore bad value; keep validated cfg.discount_rate
                pass

        level = os.getenv(f"{prefix}LOG_LEVEL")
        if level:
            updates["log_level"] = level.strip().upper()

        if not updates:
            return cfg

        run_new = cfg.run.model_copy(update=updates)
        return cfg.model_copy(update={"run": run_new})


# ----------------------------
# Convenience function
# ----------------------------


def load_inputs(path: str | Path | None = None) -> AppInputs:
    """Convenience wrapper for one-shot callers."""
    return InputsLoader().load(path)
