"""Period and fleet summaries over per-shift OEE metrics."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum
from typing import Iterable, Sequence

import numpy as np
import numpy.typing as npt

from oeewatch.domain.models import OEEMetrics, ShiftOEE

FloatArray = npt.NDArray[np.float64]


class TrendPeriod(StrEnum):
    """Bucket width for trend series."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True, slots=True)
class OEESummary:
    """Summary statistics over a set of OEE metrics."""

    record_count: int
    avg_oee: float
    avg_availability: float
    avg_performance: float
    avg_quality: float
    max_oee: float
    min_oee: float
    total_output: int
    total_defects: int
    overall_defect_rate: float


@dataclass(frozen=True, slots=True)
class TrendPoint:
    """Aggregated metrics for one trend bucket starting at `period_start`."""

    period_start: date
    summary: OEESummary


def aggregate(records: Iterable[OEEMetrics]) -> OEESummary:
    """Summarize metrics; an empty input yields an all-zero summary."""
    items = tuple(records)
    if not items:
        return OEESummary(
            record_count=0,
            avg_oee=0.0,
            avg_availability=0.0,
            avg_performance=0.0,
            avg_quality=0.0,
            max_oee=0.0,
            min_oee=0.0,
            total_output=0,
            total_defects=0,
            overall_defect_rate=0.0,
        )

    oee = _column(items, "oee")
    total_output, total_defects, defect_rate = _weighted_defect_rate(items)
    return OEESummary(
        record_count=len(items),
        avg_oee=float(np.mean(oee)),
        avg_availability=float(np.mean(_column(items, "availability"))),
        avg_performance=float(np.mean(_column(items, "performance"))),
        avg_quality=float(np.mean(_column(items, "quality"))),
        max_oee=float(np.max(oee)),
        min_oee=float(np.min(oee)),
        total_output=total_output,
        total_defects=total_defects,
        overall_defect_rate=defect_rate,
    )


def build_trend_series(
    shift_results: Iterable[ShiftOEE],
    *,
    period: TrendPeriod = TrendPeriod.DAILY,
) -> tuple[TrendPoint, ...]:
    """Group shift results into period buckets sorted by bucket start."""
    buckets: dict[date, list[OEEMetrics]] = defaultdict(list)
    for result in shift_results:
        buckets[period_start(result.date, period)].append(result.metrics)

    return tuple(
        TrendPoint(period_start=start, summary=aggregate(buckets[start]))
        for start in sorted(buckets)
    )


def compare_machines(shift_results: Iterable[ShiftOEE]) -> dict[str, OEESummary]:
    """Per-machine summaries keyed by machine id in sorted order."""
    by_machine: dict[str, list[OEEMetrics]] = defaultdict(list)
    for result in shift_results:
        by_machine[result.machine_id].append(result.metrics)
    return {machine_id: aggregate(by_machine[machine_id]) for machine_id in sorted(by_machine)}


def period_start(day: date, period: TrendPeriod) -> date:
    """First day of the bucket containing `day` (weeks start on Monday)."""
    if period == TrendPeriod.DAILY:
        return day
    if period == TrendPeriod.WEEKLY:
        return day - timedelta(days=day.weekday())
    if period == TrendPeriod.MONTHLY:
        return day.replace(day=1)
    raise ValueError(f"unsupported trend period: {period}")


def _weighted_defect_rate(items: Sequence[OEEMetrics]) -> tuple[int, int, float]:
    # Summed totals, not a mean of per-record quality.
    total_output = sum(int(item.output_qty) for item in items)
    total_defects = sum(int(item.defect_qty) for item in items)
    if total_output <= 0:
        return total_output, total_defects, 0.0
    return total_output, total_defects, total_defects / total_output


def _column(items: Sequence[OEEMetrics], name: str) -> FloatArray:
    return np.asarray([getattr(item, name) for item in items], dtype=np.float64)
