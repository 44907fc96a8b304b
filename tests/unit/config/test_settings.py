"""Tests for OEE settings validation and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from oeewatch.config import (
    OEESettings,
    OEETargets,
    ShiftSettings,
    load_settings,
    settings_from_mapping,
    settings_to_jsonable,
)


def test_defaults_match_plant_settings() -> None:
    settings = OEESettings()

    assert settings.targets.oee == 0.85
    assert settings.targets.availability == 0.90
    assert settings.targets.performance == 0.95
    assert settings.targets.quality == 0.99
    assert settings.targets.downtime_alert_minutes == 30
    assert settings.shifts.shift_hours == 12.0
    assert settings.shifts.break_minutes == 60.0


def test_targets_must_be_unit_interval() -> None:
    with pytest.raises(ValueError, match="quality must be in"):
        OEETargets(quality=1.2)


def test_oee_thresholds_must_be_monotonic() -> None:
    with pytest.raises(ValueError, match="monotonic"):
        OEETargets(low_oee_threshold=0.3, critical_oee_threshold=0.4)


def test_break_must_fit_in_shift() -> None:
    with pytest.raises(ValueError, match="shorter than the shift"):
        ShiftSettings(shift_hours=1.0, break_minutes=60.0)


def test_shift_hours_cannot_exceed_calendar_shift() -> None:
    with pytest.raises(ValueError, match="shift_hours must be in"):
        ShiftSettings(shift_hours=14.0)


def test_settings_from_mapping_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="unknown settings keys: target_oeee"):
        settings_from_mapping({"targets": {"target_oeee": 0.8}})


def test_load_settings_round_trip(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"targets": {"oee": 0.8, "low_oee_threshold": 0.5}, "shifts": {"break_minutes": 45}}),
        encoding="utf-8",
    )
    settings = load_settings(path)

    assert settings.targets.oee == 0.8
    assert settings.shifts.break_minutes == 45
    assert settings_to_jsonable(settings)["targets"]["low_oee_threshold"] == 0.5


def test_load_settings_requires_object(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError, match="expected JSON object"):
        load_settings(path)


def test_load_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "missing.json")
