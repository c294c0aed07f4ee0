# main.py
"""
Entry Point — Project Loan Appraisal

Purpose
-------
Run the appraisal engine on one input snapshot and emit the results:
  1) Load the snapshot (built-in demo project or --config JSON).
  2) Compute cost breakdown, loan schedule, depreciation, profitability,
     cash accruals, DSCR, balance sheet and viability metrics.
  3) Write CalculatedResults as JSON and print a short summary.

Usage
-----
    python main.py
    python main.py --config data/sample/inputs.json --out results.json --discount-rate 0.12
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from src.core.finance import FinancialEngineError, run_financial_model
from src.core.logs import configure_logging, get_logger
from src.inputs.inputs import AppInputs, InputsLoader, RunOptions
from src.schemas.models import CalculatedResults, ProjectFinancialInput

logger = get_logger("cli")

SAMPLE_SNAPSHOT: dict[str, str] = {
    "totalProjectCost": "1575000",
    "promotersContribution": "76232",
    "subsidy": "434519",
    "rateOfInterest": "12",
    "loanTenureYears": "7",
    "moratoriumPeriodMonths": "0",
    "projectedAnnualRevenue": "1200000",
    "projectedAnnualExpenses": "826000",
    "depreciationRate": "10",
    "revenueGrowthRate": "10",
    "expenseGrowthRate": "8",
    "machineryEquipmentCost": "200000",
    "shedBuildingCost": "300000",
    "landCost": "0",
    "furnitureFittingsCost": "150000",
    "vehicleCost": "400000",
    "workingCapitalCost": "300000",
    "otherAssetsCost": "100000",
    "projectReportCost": "15000",
    "technicalKnowHowCost": "25000",
    "licensingCost": "20000",
    "trainingCost": "30000",
    "interestDuringConstructionCost": "25000",
    "otherPreOperativeCost": "10000",
}


def build_sample_inputs() -> AppInputs:
    """Return a demo project (travel services centre, 7-year term loan)."""
    return AppInputs(inputs=ProjectFinancialInput.from_mapping(SAMPLE_SNAPSHOT), run=RunOptions())


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for configurable runs."""
    p = argparse.ArgumentParser(description="Project Loan Appraisal")
    p.add_argument("--config", type=str, default=None, help="Path to JSON inputs (flat snapshot or {inputs, run}).")
    p.add_argument("--out", type=str, default=None, help="Output JSON path (overrides config).")
    p.add_argument("--discount-rate", type=float, default=None, help="Discount rate for NPV/PI, e.g. 0.12 (overrides config).")
    p.add_argument("--log-level", type=str, default=None, help="Logging level (overrides config).")
    return p.parse_args(argv)


def summarize(results: CalculatedResults) -> str:
    v = results.viability
    return "\n".join(
        [
            f"Loan amount:       {results.loan_amount:,.2f}",
            f"EMI:               {results.emi:,.2f}",
            f"Average DSCR:      {results.dscr.average:.2f}",
            f"NPV @ {v.discount_rate:.0%}:        {v.npv:,.2f}",
            f"IRR (approx.):     {v.irr:.0%}",
            f"Payback (years):   {v.payback_period_years}",
            f"Profitability idx: {v.profitability_index:.2f}",
        ]
    )


def write_results(path: str | Path, results: CalculatedResults) -> Path:
    out = Path(path)
    if out.parent and not out.parent.exists():
        out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(results.model_dump_json(indent=2), encoding="utf-8")
    return out


def main(argv: list[str] | None = None) -> int:
    """Run one appraisal and write the JSON results (or chosen output)."""
    args = parse_args(argv)
    loader = InputsLoader()

    cfg = loader.load(args.config) if args.config else build_sample_inputs()
    cfg = loader.with_overrides(cfg, out=args.out, discount_rate=args.discount_rate, log_level=args.log_level)

    configure_logging(cfg.run.log_level)
    logger.info("running appraisal (discount_rate=%s)", cfg.run.discount_rate)

    try:
        results = run_financial_model(cfg.inputs, discount_rate=cfg.run.discount_rate)
    except FinancialEngineError as e:
        logger.error("appraisal failed: %s", e)
        print(f"Error during appraisal: {e}", file=sys.stderr)
        return 1

    out = write_results(cfg.run.out, results)
    print(summarize(results))
    print(f"Results written to {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
