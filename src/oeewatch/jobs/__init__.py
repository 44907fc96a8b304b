"""Scheduled OEE aggregation jobs."""

from oeewatch.jobs.daily import (
    AggregatedShiftRow,
    AggregationRunSummary,
    DailyAggregationResult,
    ProductionDataSource,
    build_shift_row,
    missing_aggregation_dates,
    run_batch_aggregation,
    run_daily_aggregation,
    summarize_aggregation_results,
)

__all__ = [
    "AggregatedShiftRow",
    "AggregationRunSummary",
    "DailyAggregationResult",
    "ProductionDataSource",
    "build_shift_row",
    "missing_aggregation_dates",
    "run_batch_aggregation",
    "run_daily_aggregation",
    "summarize_aggregation_results",
]
