"""OEE factor formulas and the runtime derivations that feed them.

OEE = Availability x Performance x Quality. Every formula clamps its result
into [0, 1] and maps a zero denominator to 0, so malformed counts degrade to a
bounded number instead of raising.
"""

from __future__ import annotations

from datetime import datetime
from math import floor, isnan
from typing import Iterable

from oeewatch.domain.models import MachineLog, MachineState, OEEMetrics, ProductionRecord, ShiftOEE


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    """Bound `value` to [low, high]; NaN maps to `low`."""
    if isnan(value):
        return low
    return max(low, min(high, value))


def calculate_availability(actual_runtime: float, planned_runtime: float) -> float:
    """Actual runtime over planned runtime."""
    if planned_runtime <= 0:
        return 0.0
    return clamp(actual_runtime / planned_runtime)


def calculate_performance(ideal_runtime: float, actual_runtime: float) -> float:
    """Ideal runtime for the produced output over actual runtime."""
    if actual_runtime <= 0:
        return 0.0
    return clamp(ideal_runtime / actual_runtime)


def calculate_quality(output_qty: int, defect_qty: int) -> float:
    """Good units over total units."""
    if output_qty <= 0:
        return 0.0
    return clamp((output_qty - defect_qty) / output_qty)


def calculate_oee(availability: float, performance: float, quality: float) -> float:
    """Composite OEE score from the three factors."""
    return clamp(availability * performance * quality)


def calculate_ideal_runtime(output_qty: int, tact_time: float) -> float:
    """Minutes needed to produce `output_qty` at `tact_time` seconds per unit."""
    if tact_time <= 0:
        return 0.0
    return max(0.0, output_qty * tact_time / 60.0)


def calculate_planned_runtime(shift_hours: float = 12.0, break_minutes: float = 60.0) -> float:
    """Scheduled production minutes in a shift after planned breaks."""
    return max(0.0, shift_hours * 60.0 - break_minutes)


def estimate_output_from_runtime(actual_runtime: float, tact_time: float) -> int:
    """Whole units a machine could have produced while running at tact time."""
    if tact_time <= 0 or actual_runtime <= 0:
        return 0
    return int(floor(actual_runtime * 60.0 / tact_time))


def calculate_actual_runtime_from_logs(
    logs: Iterable[MachineLog],
    start: datetime,
    end: datetime,
) -> float:
    """Minutes spent in normal operation inside the window [start, end)."""
    total_seconds = 0.0
    for log in logs:
        if log.state != MachineState.NORMAL_OPERATION:
            continue
        log_end = log.end_time if log.end_time is not None else end
        if log.start_time >= end or log_end <= start:
            continue

        effective_start = max(log.start_time, start)
        effective_end = min(log_end, end)
        if effective_end > effective_start:
            total_seconds += (effective_end - effective_start).total_seconds()

    return total_seconds / 60.0


def calculate_metrics(
    *,
    actual_runtime: float,
    planned_runtime: float,
    ideal_runtime: float,
    output_qty: int,
    defect_qty: int,
) -> OEEMetrics:
    """Build a full `OEEMetrics` value from raw runtimes and counts."""
    availability = calculate_availability(actual_runtime, planned_runtime)
    performance = calculate_performance(ideal_runtime, actual_runtime)
    quality = calculate_quality(output_qty, defect_qty)
    return OEEMetrics(
        availability=availability,
        performance=performance,
        quality=quality,
        oee=calculate_oee(availability, performance, quality),
        actual_runtime=actual_runtime,
        planned_runtime=planned_runtime,
        ideal_runtime=ideal_runtime,
        output_qty=output_qty,
        defect_qty=defect_qty,
    )


def calculate_record_metrics(record: ProductionRecord) -> OEEMetrics:
    """Compute metrics from an operator-entered production record."""
    return calculate_metrics(
        actual_runtime=record.actual_runtime,
        planned_runtime=record.planned_runtime,
        ideal_runtime=record.ideal_runtime,
        output_qty=record.output_qty,
        defect_qty=record.defect_qty,
    )


def calculate_shift_oee(record: ProductionRecord) -> ShiftOEE:
    """Compute metrics for a record and key them by machine, date and shift."""
    return ShiftOEE(
        machine_id=record.machine_id,
        date=record.date,
        shift=record.shift,
        metrics=calculate_record_metrics(record),
    )
