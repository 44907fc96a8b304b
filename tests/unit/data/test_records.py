"""Tests for production record loading."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from oeewatch.data import load_production_records, production_record_from_mapping, production_records_from_payload
from oeewatch.domain import Shift


def test_record_from_mapping_with_defaults() -> None:
    record = production_record_from_mapping(
        {"machine_id": "M-01", "date": "2024-01-01", "shift": "a", "output_qty": 100, "defect_qty": 2}
    )

    assert record.shift == Shift.A
    assert record.date == date(2024, 1, 1)
    assert record.planned_runtime == 0.0
    assert record.ideal_runtime == 0.0
    assert record.record_id is None


def test_ideal_runtime_derived_from_tact_time() -> None:
    record = production_record_from_mapping(
        {
            "machine_id": "M-01",
            "date": "2024-01-01",
            "shift": "B",
            "output_qty": 120,
            "defect_qty": 0,
            "tact_time": 30,
        }
    )

    assert record.ideal_runtime == pytest.approx(60.0)


def test_unknown_shift_is_rejected() -> None:
    with pytest.raises(ValueError, match="unknown shift"):
        production_record_from_mapping(
            {"machine_id": "M-01", "date": "2024-01-01", "shift": "C", "output_qty": 1, "defect_qty": 0}
        )


def test_payload_errors_name_the_record() -> None:
    with pytest.raises(ValueError, match="#1: production record missing field: defect_qty"):
        production_records_from_payload(
            {
                "records": [
                    {"machine_id": "M-01", "date": "2024-01-01", "shift": "A", "output_qty": 1, "defect_qty": 0},
                    {"machine_id": "M-01", "date": "2024-01-01", "shift": "B", "output_qty": 1},
                ]
            }
        )


def test_payload_must_be_list() -> None:
    with pytest.raises(ValueError, match="expected a list"):
        production_records_from_payload({"records": "nope"})


def test_load_production_records(tmp_path: Path) -> None:
    path = tmp_path / "records.json"
    path.write_text(
        json.dumps([{"machine_id": "M-01", "date": "2024-01-01", "shift": "A", "output_qty": 5, "defect_qty": 1}]),
        encoding="utf-8",
    )

    records = load_production_records(path)
    assert len(records) == 1
    assert records[0].defect_qty == 1


def test_fractional_counts_are_rejected() -> None:
    with pytest.raises(ValueError, match="output_qty must be an integer, got 12.7"):
        production_record_from_mapping(
            {"machine_id": "M-01", "date": "2024-01-01", "shift": "A", "output_qty": 12.7, "defect_qty": 0}
        )

    record = production_record_from_mapping(
        {"machine_id": "M-01", "date": "2024-01-01", "shift": "A", "output_qty": 12.0, "defect_qty": "2"}
    )
    assert record.output_qty == 12
    assert record.defect_qty == 2


def test_null_and_malformed_values_are_reported_per_record() -> None:
    base = {"machine_id": "M-01", "date": "2024-01-01", "shift": "A", "output_qty": 1, "defect_qty": 0}

    with pytest.raises(ValueError, match="#0: defect_qty must be an integer, got None"):
        production_records_from_payload([{**base, "defect_qty": None}])
    with pytest.raises(ValueError, match="#1: "):
        production_records_from_payload([base, {**base, "tact_time": [30]}])
