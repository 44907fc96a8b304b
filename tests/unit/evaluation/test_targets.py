"""Tests for target-based OEE status, grading and loss analysis."""

from __future__ import annotations

import pytest

from oeewatch.calculation import calculate_metrics
from oeewatch.config import OEETargets
from oeewatch.evaluation import (
    TargetStatus,
    analyze_losses,
    availability_status,
    evaluate_targets,
    improvement_areas,
    oee_grade,
    oee_status,
    quality_status,
    should_alert_downtime,
    status_color_hex,
    target_achievement,
)

TARGETS = OEETargets()


def test_oee_status_and_grade_share_cut_points() -> None:
    cases = {
        0.90: (TargetStatus.EXCELLENT, "A"),
        0.85: (TargetStatus.EXCELLENT, "A"),
        0.70: (TargetStatus.GOOD, "B"),
        0.60: (TargetStatus.GOOD, "B"),
        0.45: (TargetStatus.WARNING, "C"),
        0.10: (TargetStatus.CRITICAL, "D"),
    }
    for value, (status, grade) in cases.items():
        assert oee_status(value, TARGETS) == status
        assert oee_grade(value, TARGETS) == grade


def test_factor_status_is_relative_to_target() -> None:
    assert availability_status(0.90, TARGETS) == TargetStatus.EXCELLENT
    assert availability_status(0.75, TARGETS) == TargetStatus.GOOD
    assert availability_status(0.60, TARGETS) == TargetStatus.WARNING
    assert availability_status(0.50, TARGETS) == TargetStatus.CRITICAL
    assert quality_status(0.95, TARGETS) == TargetStatus.GOOD
    assert quality_status(0.80, TARGETS) == TargetStatus.CRITICAL


def test_status_colors() -> None:
    assert status_color_hex(TargetStatus.EXCELLENT) == "#52c41a"
    assert status_color_hex(TargetStatus.CRITICAL) == "#ff4d4f"


def test_improvement_areas_in_factor_order() -> None:
    assert improvement_areas(0.8, 0.99, 0.9, TARGETS) == ("availability", "quality")
    assert improvement_areas(0.95, 0.96, 0.995, TARGETS) == ()


def test_losses_cascade_through_factors() -> None:
    losses = analyze_losses(0.8, 0.9, 0.95, TARGETS)

    assert losses.oee == pytest.approx(0.684)
    assert losses.availability_loss == pytest.approx(20.0)
    assert losses.performance_loss == pytest.approx(8.0)
    assert losses.quality_loss == pytest.approx(3.6)
    assert losses.total_loss == pytest.approx(31.6)
    assert losses.availability_loss + losses.performance_loss + losses.quality_loss == pytest.approx(
        losses.total_loss
    )
    assert losses.gap_to_target == pytest.approx(16.6)


def test_gap_to_target_never_negative() -> None:
    assert analyze_losses(1.0, 1.0, 1.0, TARGETS).gap_to_target == 0.0


def test_target_achievement_and_downtime_alert() -> None:
    assert target_achievement(0.68, 0.85) == pytest.approx(80.0)
    assert target_achievement(0.5, 0.0) == 0.0
    assert should_alert_downtime(30, TARGETS) is True
    assert should_alert_downtime(29.5, TARGETS) is False


def test_evaluate_targets_reports_failed_checks() -> None:
    metrics = calculate_metrics(
        actual_runtime=480,
        planned_runtime=600,
        ideal_runtime=400,
        output_qty=1000,
        defect_qty=50,
    )
    result = evaluate_targets(metrics, targets=TARGETS)

    assert result.passed is False
    assert len(result.failed_checks) == 4
    assert result.oee_status == TargetStatus.GOOD
    assert result.grade == "B"
    assert result.improvement_areas == ("availability", "performance", "quality")


def test_evaluate_targets_passes_when_all_targets_met() -> None:
    metrics = calculate_metrics(
        actual_runtime=600,
        planned_runtime=600,
        ideal_runtime=600,
        output_qty=1000,
        defect_qty=0,
    )
    result = evaluate_targets(metrics, targets=TARGETS)

    assert result.passed is True
    assert result.failed_checks == ()
