"""OEE formulas and live shift calculation."""

from oeewatch.calculation.live import LiveOEECalculator, OEECache
from oeewatch.calculation.oee import (
    calculate_actual_runtime_from_logs,
    calculate_availability,
    calculate_ideal_runtime,
    calculate_metrics,
    calculate_oee,
    calculate_performance,
    calculate_planned_runtime,
    calculate_quality,
    calculate_record_metrics,
    calculate_shift_oee,
    clamp,
    estimate_output_from_runtime,
)

__all__ = [
    "LiveOEECalculator",
    "OEECache",
    "calculate_actual_runtime_from_logs",
    "calculate_availability",
    "calculate_ideal_runtime",
    "calculate_metrics",
    "calculate_oee",
    "calculate_performance",
    "calculate_planned_runtime",
    "calculate_quality",
    "calculate_record_metrics",
    "calculate_shift_oee",
    "clamp",
    "estimate_output_from_runtime",
]
