#!/usr/bin/env python3
"""Print (and optionally export) a debt payoff plan.

Reads debts from a JSON file, runs the payoff simulation, and prints the
dashboard summary and the amortization table. The file holds either a plain
list of debt records or a store document:
    {"debts": [...], "strategy": ..., "extra_contribution": ...}

Usage:
    pip install -e .
    python scripts/payoff_report.py debts.json
    python scripts/payoff_report.py debts.json --strategy snowball --extra 2500
    python scripts/payoff_report.py debts.json --output schedule.xlsx
"""
import argparse
import json
import logging
import sys
from pathlib import Path

import pandas as pd

from debt_planner.models.debt import Debt
from debt_planner.models.plan import PayoffPlan
from debt_planner.services.payoff_service import build_payoff_plan, default_planner_settings
from debt_planner.simulation.strategies import list_strategy_names

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


def load_input(path: Path) -> tuple[list[Debt], dict]:
    """Return (debts, stored settings) from a debt list or store document."""
    with path.open("r", encoding="utf-8") as fh:
        data = json.load(fh)
    if isinstance(data, list):
        return [Debt.model_validate(item) for item in data], {}
    debts = [Debt.model_validate(item) for item in data.get("debts", [])]
    stored = {k: data[k] for k in ("strategy", "extra_contribution") if k in data}
    return debts, stored


def schedule_frame(plan: PayoffPlan) -> pd.DataFrame:
    """Flatten the schedule into one row per month, four columns per debt."""
    rows = []
    for snapshot in plan.schedule:
        row = {"Month": snapshot.month}
        for state in snapshot.debts:
            row[f"{state.name} #{state.debt_id} | Min"] = round(state.minimum_payment, 2)
            row[f"{state.name} #{state.debt_id} | Extra"] = round(state.extra_payment, 2)
            row[f"{state.name} #{state.debt_id} | Interest"] = round(state.interest_paid, 2)
            row[f"{state.name} #{state.debt_id} | Balance"] = round(state.remaining_amount, 2)
        row["Note"] = snapshot.freed_message.text if snapshot.freed_message else ""
        rows.append(row)
    return pd.DataFrame(rows)


def print_summary(plan: PayoffPlan) -> None:
    s = plan.summary
    print(f"\n{'=' * 72}")
    print(f"  PAYOFF PLAN ({plan.strategy.value})")
    print(f"{'=' * 72}")
    print(f"Total term:          {s.total_months:>10d} months ({s.total_years:.1f} years)")
    print(f"Total interest:      ${s.total_interest:>14,.2f}")
    print(f"Total paid:          ${s.total_paid:>14,.2f}")
    print(f"Minimum payments:    ${s.total_minimum_payment:>14,.2f}")
    print(f"Monthly outlay:      ${s.total_monthly_outlay:>14,.2f}")
    print(f"Current extra:       ${s.current_extra:>14,.2f}"
          f"  (base ${s.base_extra:,.2f} + freed ${s.freed_extra:,.2f})")
    if s.horizon_reached:
        print("WARNING: debts are still outstanding at the 600-month horizon")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("input", type=Path, help="JSON file with debts")
    parser.add_argument("--strategy", choices=list_strategy_names(), default=None)
    parser.add_argument("--extra", type=float, default=None, help="Monthly extra contribution")
    parser.add_argument("--output", type=Path, default=None, help="Export schedule (.csv or .xlsx)")
    args = parser.parse_args()

    if not args.input.exists():
        print(f"ERROR: File not found: {args.input}")
        sys.exit(1)

    debts, stored = load_input(args.input)
    defaults = default_planner_settings()
    strategy = args.strategy or stored.get("strategy") or defaults.strategy
    extra = args.extra if args.extra is not None else stored.get("extra_contribution", defaults.extra_contribution)
    if extra < 0:
        print("ERROR: --extra must be non-negative")
        sys.exit(1)

    logger.info("Loaded %d debts from %s", len(debts), args.input)
    plan = build_payoff_plan(debts, strategy, extra)
    print_summary(plan)

    df = schedule_frame(plan)
    if not df.empty:
        with pd.option_context("display.max_rows", None, "display.max_columns", None, "display.width", 200):
            print()
            print(df.to_string(index=False))

    if args.output:
        if args.output.suffix.lower() == ".xlsx":
            df.to_excel(args.output, index=False)
        else:
            df.to_csv(args.output, index=False)
        print(f"\nSchedule written to {args.output}")


if __name__ == "__main__":
    main()
