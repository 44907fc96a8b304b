"""Daily per-machine, per-shift OEE aggregation job."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Iterable, Mapping, Protocol, Sequence

from oeewatch.calculation.oee import (
    calculate_actual_runtime_from_logs,
    calculate_ideal_runtime,
    calculate_metrics,
    calculate_planned_runtime,
    estimate_output_from_runtime,
)
from oeewatch.config.settings import OEESettings
from oeewatch.domain.models import Machine, MachineLog, ProductionRecord, Shift
from oeewatch.shifts.schedule import shift_time_ranges

logger = logging.getLogger(__name__)

RATIO_DECIMALS = 4
MISSING_RECORD_FRACTION = 0.5


class ProductionDataSource(Protocol):
    """Query functions the job needs from the persistence layer."""

    def active_machines(self) -> Sequence[Machine]: ...

    def machine_logs(self, machine_id: str, start: datetime, end: datetime) -> Sequence[MachineLog]: ...

    def production_record(self, machine_id: str, day: date, shift: Shift) -> ProductionRecord | None: ...

    def save_shift_row(self, row: AggregatedShiftRow) -> None: ...


@dataclass(frozen=True, slots=True)
class AggregatedShiftRow:
    """Persisted OEE row for one machine shift; ratios cached at 4 decimals."""

    machine_id: str
    machine_name: str
    date: date
    shift: Shift
    planned_runtime: int
    actual_runtime: int
    ideal_runtime: int
    output_qty: int
    defect_qty: int
    availability: float
    performance: float
    quality: float
    oee: float
    output_estimated: bool
    record_id: str | None = None


@dataclass(frozen=True, slots=True)
class DailyAggregationResult:
    """Outcome of aggregating one production date."""

    success: bool
    date: date
    processed_records: int
    results: tuple[AggregatedShiftRow, ...] = ()
    error: str | None = None


@dataclass(frozen=True, slots=True)
class AggregationRunSummary:
    """Roll-up over several daily aggregation results."""

    total_dates: int
    successful_dates: int
    failed_dates: int
    total_records_processed: int
    success_rate: float


def run_daily_aggregation(
    source: ProductionDataSource,
    target_date: date,
    *,
    settings: OEESettings | None = None,
) -> DailyAggregationResult:
    """Compute and persist shift OEE rows for every active machine on `target_date`."""
    settings = settings if settings is not None else OEESettings()
    logger.info("starting daily OEE aggregation for %s", target_date.isoformat())

    try:
        machines = [machine for machine in source.active_machines() if machine.is_active]
    except Exception as exc:
        logger.error("failed to list active machines: %s", exc)
        return DailyAggregationResult(
            success=False,
            date=target_date,
            processed_records=0,
            error=str(exc),
        )

    logger.info("found %d active machines", len(machines))
    windows = shift_time_ranges(target_date)
    planned_runtime = calculate_planned_runtime(settings.shifts.shift_hours, settings.shifts.break_minutes)

    rows: list[AggregatedShiftRow] = []
    for machine in machines:
        for shift in Shift:
            window = windows[shift].limited_to(settings.shifts.shift_hours)
            try:
                logs = source.machine_logs(machine.machine_id, window.start, window.end)
                existing = source.production_record(machine.machine_id, target_date, shift)
                row = build_shift_row(
                    machine,
                    target_date,
                    shift,
                    actual_runtime=calculate_actual_runtime_from_logs(logs, window.start, window.end),
                    planned_runtime=planned_runtime,
                    existing=existing,
                )
                source.save_shift_row(row)
            except Exception as exc:
                logger.error(
                    "error processing machine %s shift %s: %s",
                    machine.machine_id,
                    shift.value,
                    exc,
                )
                continue

            action = "updated" if existing is not None else "created"
            logger.info("%s shift row for machine %s shift %s", action, machine.name, shift.value)
            rows.append(row)

    logger.info("completed daily OEE aggregation: %d rows", len(rows))
    return DailyAggregationResult(
        success=True,
        date=target_date,
        processed_records=len(rows),
        results=tuple(rows),
    )


def build_shift_row(
    machine: Machine,
    day: date,
    shift: Shift,
    *,
    actual_runtime: float,
    planned_runtime: float,
    existing: ProductionRecord | None,
) -> AggregatedShiftRow:
    """Derive the persisted row; output is estimated from tact time when nothing was recorded."""
    output_qty = existing.output_qty if existing is not None else 0
    defect_qty = existing.defect_qty if existing is not None else 0
    output_estimated = False
    if existing is None and actual_runtime > 0:
        output_qty = estimate_output_from_runtime(actual_runtime, machine.default_tact_time)
        output_estimated = True
        logger.info(
            "estimated output for machine %s shift %s: %d units",
            machine.name,
            shift.value,
            output_qty,
        )

    ideal_runtime = calculate_ideal_runtime(output_qty, machine.default_tact_time)
    metrics = calculate_metrics(
        actual_runtime=actual_runtime,
        planned_runtime=planned_runtime,
        ideal_runtime=ideal_runtime,
        output_qty=output_qty,
        defect_qty=defect_qty,
    )
    return AggregatedShiftRow(
        machine_id=machine.machine_id,
        machine_name=machine.name,
        date=day,
        shift=shift,
        planned_runtime=round(planned_runtime),
        actual_runtime=round(actual_runtime),
        ideal_runtime=round(ideal_runtime),
        output_qty=output_qty,
        defect_qty=defect_qty,
        availability=round(metrics.availability, RATIO_DECIMALS),
        performance=round(metrics.performance, RATIO_DECIMALS),
        quality=round(metrics.quality, RATIO_DECIMALS),
        oee=round(metrics.oee, RATIO_DECIMALS),
        output_estimated=output_estimated,
        record_id=existing.record_id if existing is not None else None,
    )


def run_batch_aggregation(
    source: ProductionDataSource,
    dates: Iterable[date],
    *,
    settings: OEESettings | None = None,
) -> tuple[DailyAggregationResult, ...]:
    """Aggregate several dates in order; one failing date does not stop the rest."""
    return tuple(run_daily_aggregation(source, day, settings=settings) for day in dates)


def summarize_aggregation_results(results: Sequence[DailyAggregationResult]) -> AggregationRunSummary:
    successful = [result for result in results if result.success]
    total = len(results)
    return AggregationRunSummary(
        total_dates=total,
        successful_dates=len(successful),
        failed_dates=total - len(successful),
        total_records_processed=sum(result.processed_records for result in successful),
        success_rate=(len(successful) / total * 100.0) if total > 0 else 0.0,
    )


def missing_aggregation_dates(
    record_counts: Mapping[date, int],
    *,
    active_machine_count: int,
) -> tuple[date, ...]:
    """Dates holding fewer than half the expected two-shift rows per active machine."""
    if active_machine_count < 0:
        raise ValueError("active_machine_count must be >= 0")
    expected = active_machine_count * len(Shift)
    return tuple(
        day
        for day in sorted(record_counts)
        if record_counts[day] < expected * MISSING_RECORD_FRACTION
    )
