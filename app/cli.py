"""CLI entry point for Compound Pro."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pandas as pd

from core.config import DEFAULT_CONFIG, SimulationConfig
from core.errors import CompoundProError, TargetYearError
from data_prep.loader import load_config_json
from data_prep.validators import validate_config
from engine.runner import run_month_detail, run_projection
from reports.tables import age_table, monthly_frame, yearly_frame
from store.json_file import JsonFileScenarioStore

from .settings import store_path

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="compound-pro", description="Compound interest projection")
    parser.add_argument("config", nargs="?", help="Path to config JSON (default: built-in example plan)")
    parser.add_argument("--validate", action="store_true", help="Validate the config only")
    parser.add_argument("--year", type=int, help="Print the monthly detail for this year instead of the yearly table")
    parser.add_argument("--summary", action="store_true", help="Print the summary table")
    parser.add_argument("-o", "--output", help="Export the yearly table (.csv or .xlsx)")
    parser.add_argument("--chart", help="Write a trajectory chart image (e.g. chart.png)")
    parser.add_argument("--store", help="Scenario file (default: data/scenarios.json or $COMPOUND_PRO_STORE)")
    parser.add_argument("--save", metavar="NAME", help="Save the config as a named scenario")
    parser.add_argument("--load", metavar="ID", help="Use a saved scenario as the config")
    parser.add_argument("--delete", metavar="ID", help="Delete a saved scenario and exit")
    parser.add_argument("--list-scenarios", action="store_true", help="List saved scenarios and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def _print_validation(errors: List[str], warnings: List[str]) -> None:
    for warning in warnings:
        print(f"WARNING: {warning}")
    for error in errors:
        print(f"ERROR: {error}", file=sys.stderr)


def _export(df: pd.DataFrame, path: str) -> None:
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        df.to_csv(path, index=False)
    elif suffix == ".xlsx":
        df.to_excel(path, index=False, sheet_name="Projection")
    else:
        raise ValueError(f"Unsupported export format {suffix!r}; use .csv or .xlsx")


def _resolve_config(args: argparse.Namespace, store: JsonFileScenarioStore) -> SimulationConfig:
    if args.load:
        record = store.get(args.load)
        if record is None:
            raise CompoundProError(f"No saved scenario with id {args.load!r}")
        print(f"Loaded scenario '{record.name}' ({record.date})")
        return record.config()
    if args.config:
        return load_config_json(args.config)
    return DEFAULT_CONFIG


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = JsonFileScenarioStore(args.store or store_path())

    try:
        if args.list_scenarios:
            records = store.list()
            if not records:
                print("No saved scenarios.")
            else:
                listing = pd.DataFrame([r.model_dump(exclude={"data"}) for r in records])
                print(listing.to_string(index=False))
            return 0

        if args.delete:
            if store.remove(args.delete):
                print(f"Deleted scenario {args.delete}")
                return 0
            print(f"No saved scenario with id {args.delete!r}", file=sys.stderr)
            return 1

        config = _resolve_config(args, store)
    except (CompoundProError, OSError) as exc:
        print(f"Failed to load config: {exc}", file=sys.stderr)
        return 2

    validation = validate_config(config)
    _print_validation(validation.errors, validation.warnings)
    if not validation.is_valid:
        return 1
    if args.validate:
        print("Config is valid.")
        return 0

    if args.save:
        try:
            record = store.add(args.save, config)
        except (CompoundProError, OSError) as exc:
            print(f"Failed to save scenario: {exc}", file=sys.stderr)
            return 2
        print(f"Saved scenario '{record.name}' as {record.id}")

    result = run_projection(config, validate=False)

    if args.year is not None:
        try:
            details = run_month_detail(config, args.year, validate=False)
        except TargetYearError as exc:
            print(f"ERROR: {exc}", file=sys.stderr)
            return 2
        print(f"Year {args.year} (age {config.start_age + args.year}):")
        print(monthly_frame(details).to_string(index=False))
    else:
        print(age_table(result.yearly).to_string(index=False))

    if args.summary:
        print()
        print(result.summary.to_dataframe().to_string(index=False))

    if args.output:
        try:
            _export(yearly_frame(result.yearly), args.output)
        except (ValueError, OSError) as exc:
            print(f"Failed to export: {exc}", file=sys.stderr)
            return 2
        print(f"Wrote yearly table to {args.output}")

    if args.chart:
        from reports.charts import save_trajectory_chart

        save_trajectory_chart(result.yearly, args.chart, retirement_year=config.retirement_year)
        print(f"Wrote chart to {args.chart}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
