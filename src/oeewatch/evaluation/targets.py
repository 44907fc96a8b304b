"""Target-based status, grading and loss analysis for OEE results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from oeewatch.config.settings import OEETargets
from oeewatch.domain.models import OEEMetrics


class TargetStatus(StrEnum):
    """Four-tier status relative to configured plant targets."""

    EXCELLENT = "excellent"
    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"


_STATUS_HEX: dict[TargetStatus, str] = {
    TargetStatus.EXCELLENT: "#52c41a",
    TargetStatus.GOOD: "#1890ff",
    TargetStatus.WARNING: "#faad14",
    TargetStatus.CRITICAL: "#ff4d4f",
}

_FACTOR_ORDER = ("availability", "performance", "quality")


@dataclass(frozen=True, slots=True)
class LossAnalysis:
    """OEE losses split by factor, in percentage points."""

    oee: float
    target_oee: float
    total_loss: float
    availability_loss: float
    performance_loss: float
    quality_loss: float
    gap_to_target: float


@dataclass(frozen=True, slots=True)
class TargetEvaluation:
    """Result of applying plant targets to one set of metrics."""

    passed: bool
    failed_checks: tuple[str, ...]
    oee_status: TargetStatus
    grade: str
    improvement_areas: tuple[str, ...]
    losses: LossAnalysis


def oee_status(value: float, targets: OEETargets) -> TargetStatus:
    if value >= targets.oee:
        return TargetStatus.EXCELLENT
    if value >= targets.low_oee_threshold:
        return TargetStatus.GOOD
    if value >= targets.critical_oee_threshold:
        return TargetStatus.WARNING
    return TargetStatus.CRITICAL


def availability_status(value: float, targets: OEETargets) -> TargetStatus:
    return _relative_status(value, targets.availability, good_ratio=0.8, warning_ratio=0.6)


def performance_status(value: float, targets: OEETargets) -> TargetStatus:
    return _relative_status(value, targets.performance, good_ratio=0.8, warning_ratio=0.6)


def quality_status(value: float, targets: OEETargets) -> TargetStatus:
    return _relative_status(value, targets.quality, good_ratio=0.95, warning_ratio=0.9)


def status_color_hex(status: TargetStatus) -> str:
    """Hex color used by gauges and badges for a target status."""
    return _STATUS_HEX[status]


def oee_grade(value: float, targets: OEETargets) -> str:
    """Letter grade A-D on the same cut points as `oee_status`."""
    status = oee_status(value, targets)
    return {
        TargetStatus.EXCELLENT: "A",
        TargetStatus.GOOD: "B",
        TargetStatus.WARNING: "C",
        TargetStatus.CRITICAL: "D",
    }[status]


def improvement_areas(
    availability: float,
    performance: float,
    quality: float,
    targets: OEETargets,
) -> tuple[str, ...]:
    """Factors that fall short of their targets, in OEE factor order."""
    values = {"availability": availability, "performance": performance, "quality": quality}
    return tuple(name for name in _FACTOR_ORDER if values[name] < getattr(targets, name))


def analyze_losses(
    availability: float,
    performance: float,
    quality: float,
    targets: OEETargets,
) -> LossAnalysis:
    """Cascade OEE losses: each factor's loss is measured on what survived the previous one."""
    oee = availability * performance * quality
    return LossAnalysis(
        oee=oee,
        target_oee=targets.oee,
        total_loss=(1.0 - oee) * 100.0,
        availability_loss=(1.0 - availability) * 100.0,
        performance_loss=availability * (1.0 - performance) * 100.0,
        quality_loss=availability * performance * (1.0 - quality) * 100.0,
        gap_to_target=max(0.0, (targets.oee - oee) * 100.0),
    )


def target_achievement(actual: float, target: float) -> float:
    """Actual as a percentage of target; 0 when the target is 0."""
    if target == 0:
        return 0.0
    return actual / target * 100.0


def should_alert_downtime(downtime_minutes: float, targets: OEETargets) -> bool:
    return downtime_minutes >= targets.downtime_alert_minutes


def evaluate_targets(metrics: OEEMetrics, *, targets: OEETargets) -> TargetEvaluation:
    """Check OEE and each factor against plant targets."""
    failed_checks: list[str] = []
    if metrics.oee < targets.oee:
        failed_checks.append(f"oee {metrics.oee:.4f} < target {targets.oee:.4f}")
    for name in _FACTOR_ORDER:
        value = float(getattr(metrics, name))
        target = float(getattr(targets, name))
        if value < target:
            failed_checks.append(f"{name} {value:.4f} < target {target:.4f}")

    return TargetEvaluation(
        passed=(len(failed_checks) == 0),
        failed_checks=tuple(failed_checks),
        oee_status=oee_status(metrics.oee, targets),
        grade=oee_grade(metrics.oee, targets),
        improvement_areas=improvement_areas(
            metrics.availability, metrics.performance, metrics.quality, targets
        ),
        losses=analyze_losses(metrics.availability, metrics.performance, metrics.quality, targets),
    )


def _relative_status(
    value: float,
    target: float,
    *,
    good_ratio: float,
    warning_ratio: float,
) -> TargetStatus:
    if value >= target:
        return TargetStatus.EXCELLENT
    if value >= target * good_ratio:
        return TargetStatus.GOOD
    if value >= target * warning_ratio:
        return TargetStatus.WARNING
    return TargetStatus.CRITICAL
