"""Classification, aggregation and target evaluation of OEE results."""

from oeewatch.evaluation.aggregation import (
    OEESummary,
    TrendPeriod,
    TrendPoint,
    aggregate,
    build_trend_series,
    compare_machines,
    period_start,
)
from oeewatch.evaluation.report import OEEReport, build_oee_report, oee_report_to_jsonable
from oeewatch.evaluation.targets import (
    LossAnalysis,
    TargetEvaluation,
    TargetStatus,
    analyze_losses,
    availability_status,
    evaluate_targets,
    improvement_areas,
    oee_grade,
    oee_status,
    performance_status,
    quality_status,
    should_alert_downtime,
    status_color_hex,
    target_achievement,
)
from oeewatch.evaluation.thresholds import QUALITY_BANDS, QualityBands, classify, color_for

__all__ = [
    "LossAnalysis",
    "OEEReport",
    "OEESummary",
    "QUALITY_BANDS",
    "QualityBands",
    "TargetEvaluation",
    "TargetStatus",
    "TrendPeriod",
    "TrendPoint",
    "aggregate",
    "analyze_losses",
    "availability_status",
    "build_oee_report",
    "build_trend_series",
    "classify",
    "color_for",
    "compare_machines",
    "evaluate_targets",
    "improvement_areas",
    "oee_grade",
    "oee_report_to_jsonable",
    "oee_status",
    "performance_status",
    "period_start",
    "quality_status",
    "should_alert_downtime",
    "status_color_hex",
    "target_achievement",
]
