"""Period OEE report assembled from production records."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from oeewatch.calculation.oee import calculate_metrics, calculate_shift_oee
from oeewatch.config.settings import OEESettings, settings_to_jsonable
from oeewatch.domain.models import OEEMetrics, ProductionRecord, ShiftOEE
from oeewatch.evaluation.aggregation import (
    OEESummary,
    TrendPeriod,
    TrendPoint,
    aggregate,
    build_trend_series,
    compare_machines,
)
from oeewatch.evaluation.targets import TargetEvaluation, evaluate_targets
from oeewatch.evaluation.thresholds import classify, color_for


@dataclass(frozen=True, slots=True)
class OEEReport:
    """Per-shift results with fleet, machine and trend summaries."""

    settings: OEESettings
    period: TrendPeriod
    shift_results: tuple[ShiftOEE, ...]
    summary: OEESummary
    overall: OEEMetrics
    machines: dict[str, OEESummary]
    trend: tuple[TrendPoint, ...]
    target_evaluation: TargetEvaluation


def build_oee_report(
    records: Sequence[ProductionRecord],
    *,
    settings: OEESettings,
    period: TrendPeriod = TrendPeriod.DAILY,
) -> OEEReport:
    shift_results = tuple(
        sorted(
            (calculate_shift_oee(record) for record in records),
            key=lambda result: (result.date, result.machine_id, result.shift.value),
        )
    )
    summary = aggregate(result.metrics for result in shift_results)
    overall = _pooled_metrics(shift_results)
    return OEEReport(
        settings=settings,
        period=period,
        shift_results=shift_results,
        summary=summary,
        overall=overall,
        machines=compare_machines(shift_results),
        trend=build_trend_series(shift_results, period=period),
        target_evaluation=evaluate_targets(overall, targets=settings.targets),
    )


def oee_report_to_jsonable(report: OEEReport) -> dict[str, Any]:
    """Serialize a report into a JSON-safe structure."""
    shifts: list[dict[str, Any]] = []
    for result in report.shift_results:
        shifts.append(
            {
                "machine_id": result.machine_id,
                "date": result.date.isoformat(),
                "shift": result.shift.value,
                "metrics": asdict(result.metrics),
                "level": classify(result.metrics.oee).value,
                "color": color_for(result.metrics.oee).value,
            }
        )

    return {
        "settings": settings_to_jsonable(report.settings),
        "period": report.period.value,
        "summary": asdict(report.summary),
        "summary_level": classify(report.summary.avg_oee).value,
        "overall": asdict(report.overall),
        "machines": {machine_id: asdict(summary) for machine_id, summary in report.machines.items()},
        "trend": [
            {"period_start": point.period_start.isoformat(), "summary": asdict(point.summary)}
            for point in report.trend
        ],
        "target_evaluation": {
            "passed": report.target_evaluation.passed,
            "failed_checks": list(report.target_evaluation.failed_checks),
            "oee_status": report.target_evaluation.oee_status.value,
            "grade": report.target_evaluation.grade,
            "improvement_areas": list(report.target_evaluation.improvement_areas),
            "losses": asdict(report.target_evaluation.losses),
        },
        "shifts": shifts,
    }


def _pooled_metrics(shift_results: Sequence[ShiftOEE]) -> OEEMetrics:
    """Period OEE from summed runtimes and counts, so oee stays the product of its factors."""
    return calculate_metrics(
        actual_runtime=sum(result.metrics.actual_runtime for result in shift_results),
        planned_runtime=sum(result.metrics.planned_runtime for result in shift_results),
        ideal_runtime=sum(result.metrics.ideal_runtime for result in shift_results),
        output_qty=sum(result.metrics.output_qty for result in shift_results),
        defect_qty=sum(result.metrics.defect_qty for result in shift_results),
    )
