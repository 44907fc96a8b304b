"""Plant-level OEE targets and shift settings."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Mapping

# Each of the two calendar shifts spans 12 hours; shift_hours is the worked part of it.
SHIFT_WINDOW_HOURS = 12.0


@dataclass(frozen=True, slots=True)
class OEETargets:
    """Target ratios and alert thresholds configured per plant."""

    oee: float = 0.85
    availability: float = 0.90
    performance: float = 0.95
    quality: float = 0.99
    low_oee_threshold: float = 0.60
    critical_oee_threshold: float = 0.40
    downtime_alert_minutes: int = 30

    def __post_init__(self) -> None:
        _assert_unit_interval(self.oee, field_name="oee")
        _assert_unit_interval(self.availability, field_name="availability")
        _assert_unit_interval(self.performance, field_name="performance")
        _assert_unit_interval(self.quality, field_name="quality")
        _assert_unit_interval(self.low_oee_threshold, field_name="low_oee_threshold")
        _assert_unit_interval(self.critical_oee_threshold, field_name="critical_oee_threshold")
        if not self.critical_oee_threshold <= self.low_oee_threshold <= self.oee:
            raise ValueError("critical/low/target OEE thresholds must be monotonic ascending")
        if self.downtime_alert_minutes < 1 or self.downtime_alert_minutes > 480:
            raise ValueError("downtime_alert_minutes must be in [1, 480]")


@dataclass(frozen=True, slots=True)
class ShiftSettings:
    """Shift length, planned breaks and defaults used when deriving runtimes."""

    shift_hours: float = 12.0
    break_minutes: float = 60.0
    default_tact_time: float = 30.0
    shift_end_notice_minutes: int = 15

    def __post_init__(self) -> None:
        if self.shift_hours <= 0.0 or self.shift_hours > SHIFT_WINDOW_HOURS:
            raise ValueError(f"shift_hours must be in (0, {SHIFT_WINDOW_HOURS:g}]")
        if self.break_minutes < 0.0 or self.break_minutes > 240.0:
            raise ValueError("break_minutes must be in [0, 240]")
        if self.break_minutes >= self.shift_hours * 60.0:
            raise ValueError("break_minutes must be shorter than the shift")
        if self.default_tact_time <= 0.0:
            raise ValueError("default_tact_time must be > 0")
        if self.shift_end_notice_minutes < 0:
            raise ValueError("shift_end_notice_minutes must be >= 0")


@dataclass(frozen=True, slots=True)
class OEESettings:
    """Complete settings bundle consumed by jobs and the report CLI."""

    targets: OEETargets = field(default_factory=OEETargets)
    shifts: ShiftSettings = field(default_factory=ShiftSettings)


def settings_from_mapping(payload: Mapping[str, Any]) -> OEESettings:
    """Build settings from a `{"targets": {...}, "shifts": {...}}` mapping."""
    targets_raw = payload.get("targets", {})
    shifts_raw = payload.get("shifts", {})
    if not isinstance(targets_raw, Mapping):
        raise ValueError("settings 'targets' must be an object")
    if not isinstance(shifts_raw, Mapping):
        raise ValueError("settings 'shifts' must be an object")

    unknown = set(targets_raw) - set(OEETargets.__dataclass_fields__)
    unknown |= set(shifts_raw) - set(ShiftSettings.__dataclass_fields__)
    if unknown:
        raise ValueError(f"unknown settings keys: {', '.join(sorted(unknown))}")

    return OEESettings(
        targets=OEETargets(**targets_raw),
        shifts=ShiftSettings(**shifts_raw),
    )


def load_settings(path: Path) -> OEESettings:
    """Load settings from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"settings file does not exist: {path}")
    payload = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"expected JSON object: {path}")
    return settings_from_mapping(payload)


def settings_to_jsonable(settings: OEESettings) -> dict[str, Any]:
    """Convert settings into a JSON-serializable dictionary."""
    return {
        "targets": asdict(settings.targets),
        "shifts": asdict(settings.shifts),
    }


def _assert_unit_interval(value: float, *, field_name: str) -> None:
    if value < 0.0 or value > 1.0:
        raise ValueError(f"{field_name} must be in [0, 1]")
