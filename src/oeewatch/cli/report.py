"""OEE report runner over exported production records."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

from oeewatch.config import OEESettings, load_settings
from oeewatch.data import load_production_records
from oeewatch.evaluation import TrendPeriod, build_oee_report, oee_report_to_jsonable


@dataclass(frozen=True, slots=True)
class ReportArtifacts:
    """Artifacts emitted by one report execution."""

    report_path: Path
    record_count: int
    avg_oee: float
    targets_passed: bool


def build_parser() -> argparse.ArgumentParser:
    """Create parser for the OEE report runner."""
    parser = argparse.ArgumentParser(
        prog="oeewatch-report",
        description=(
            "Compute per-shift OEE, fleet and machine summaries, and a trend series "
            "from a JSON export of production records."
        ),
    )
    parser.add_argument("--workspace-root", type=Path, default=Path.cwd())
    parser.add_argument(
        "--records",
        type=Path,
        required=True,
        help="JSON list of production records, or an object with a 'records' list.",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Optional JSON settings with 'targets' and 'shifts' sections.",
    )
    parser.add_argument(
        "--period",
        choices=tuple(period.value for period in TrendPeriod),
        default=TrendPeriod.DAILY.value,
    )
    parser.add_argument("--output", type=Path, default=Path("artifacts/oee_report.json"))
    parser.add_argument(
        "--fail-on-target",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Exit with status 1 when the period misses any configured target.",
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
    )
    return parser


def run_report_from_args(args: argparse.Namespace) -> ReportArtifacts:
    """Load inputs, build the report and write it to disk."""
    workspace_root = args.workspace_root.resolve()
    records_path = _resolve_path(workspace_root, args.records)
    output_path = _resolve_path(workspace_root, args.output)

    settings = (
        OEESettings()
        if args.settings is None
        else load_settings(_resolve_path(workspace_root, args.settings))
    )
    records = load_production_records(records_path)
    report = build_oee_report(records, settings=settings, period=TrendPeriod(args.period))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    _write_json(output_path, oee_report_to_jsonable(report))
    return ReportArtifacts(
        report_path=output_path,
        record_count=report.summary.record_count,
        avg_oee=report.summary.avg_oee,
        targets_passed=report.target_evaluation.passed,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entrypoint for the OEE report runner."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        artifacts = run_report_from_args(args)
    except Exception as exc:
        print(f"[ERROR] OEE report failed: {exc}", file=sys.stderr)
        return 2

    print(f"report: {artifacts.report_path}")
    print(f"records: {artifacts.record_count}")
    print(f"avg_oee: {artifacts.avg_oee:.4f}")
    print(f"targets_passed: {artifacts.targets_passed}")
    if args.fail_on_target and not artifacts.targets_passed:
        return 1
    return 0


def _resolve_path(base_dir: Path, path_value: Path) -> Path:
    if path_value.is_absolute():
        return path_value.resolve()
    return (base_dir / path_value).resolve()


def _write_json(path: Path, payload: dict[str, Any]) -> None:
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
