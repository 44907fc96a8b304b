"""Load production records from JSON exports of the records table."""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path
from typing import Any, Mapping, Sequence

from oeewatch.calculation.oee import calculate_ideal_runtime
from oeewatch.domain.models import ProductionRecord, Shift


def production_record_from_mapping(raw: Mapping[str, Any]) -> ProductionRecord:
    """Parse one record; `ideal_runtime` falls back to `tact_time` (seconds/unit) when absent."""
    for key in ("machine_id", "date", "shift", "output_qty", "defect_qty"):
        if key not in raw:
            raise ValueError(f"production record missing field: {key}")

    shift_raw = str(raw["shift"]).strip().upper()
    try:
        shift = Shift(shift_raw)
    except ValueError as exc:
        raise ValueError(f"unknown shift: {raw['shift']!r}") from exc

    output_qty = _as_count(raw["output_qty"], field_name="output_qty")
    ideal_runtime = raw.get("ideal_runtime")
    if ideal_runtime is None and raw.get("tact_time") is not None:
        ideal_runtime = calculate_ideal_runtime(output_qty, float(raw["tact_time"]))

    record_id = raw.get("record_id")
    return ProductionRecord(
        machine_id=str(raw["machine_id"]),
        date=date.fromisoformat(str(raw["date"])),
        shift=shift,
        output_qty=output_qty,
        defect_qty=_as_count(raw["defect_qty"], field_name="defect_qty"),
        planned_runtime=float(raw.get("planned_runtime") or 0.0),
        actual_runtime=float(raw.get("actual_runtime") or 0.0),
        ideal_runtime=float(ideal_runtime or 0.0),
        record_id=None if record_id is None else str(record_id),
    )


def production_records_from_payload(payload: Any) -> tuple[ProductionRecord, ...]:
    """Accept either a JSON list of records or an object with a `records` list."""
    if isinstance(payload, Mapping):
        payload = payload.get("records")
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        raise ValueError("expected a list of production records")

    records: list[ProductionRecord] = []
    for index, raw in enumerate(payload):
        if not isinstance(raw, Mapping):
            raise ValueError(f"production record #{index} must be an object")
        try:
            records.append(production_record_from_mapping(raw))
        except (TypeError, ValueError) as exc:
            raise ValueError(f"production record #{index}: {exc}") from exc
    return tuple(records)


def load_production_records(path: Path) -> tuple[ProductionRecord, ...]:
    """Read production records from a JSON file."""
    if not path.exists():
        raise FileNotFoundError(f"records file does not exist: {path}")
    return production_records_from_payload(json.loads(path.read_text(encoding="utf-8")))


def _as_count(value: Any, *, field_name: str) -> int:
    if value is None or isinstance(value, bool):
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{field_name} must be an integer, got {value!r}") from exc
    if not number.is_integer():
        raise ValueError(f"{field_name} must be an integer, got {value!r}")
    return int(number)
