"""Core domain models for OEE monitoring."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum


class Shift(StrEnum):
    """Scheduled work periods tracked per machine and date."""

    A = "A"
    B = "B"


class MachineState(StrEnum):
    """Operating states recorded in machine logs."""

    NORMAL_OPERATION = "NORMAL_OPERATION"
    MAINTENANCE = "MAINTENANCE"
    MODEL_CHANGE = "MODEL_CHANGE"
    PLANNED_STOP = "PLANNED_STOP"
    PROGRAM_CHANGE = "PROGRAM_CHANGE"
    TOOL_CHANGE = "TOOL_CHANGE"
    TEMPORARY_STOP = "TEMPORARY_STOP"


class PerformanceLevel(StrEnum):
    """Three-tier band used for OEE and factor classification."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"


class StatusColor(StrEnum):
    """Semantic presentation color for a performance level."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class OEEMetrics:
    """OEE factors and the raw counts they were derived from."""

    availability: float
    performance: float
    quality: float
    oee: float
    actual_runtime: float
    planned_runtime: float
    ideal_runtime: float
    output_qty: int
    defect_qty: int


@dataclass(frozen=True, slots=True)
class Machine:
    """Production machine with its rated tact time in seconds per unit."""

    machine_id: str
    name: str
    default_tact_time: float
    is_active: bool = True

    def __post_init__(self) -> None:
        if not self.machine_id.strip():
            raise ValueError("machine_id must not be empty")
        if self.default_tact_time <= 0.0:
            raise ValueError("default_tact_time must be > 0")


@dataclass(frozen=True, slots=True)
class MachineLog:
    """State interval for one machine; `end_time=None` means still open."""

    log_id: str
    machine_id: str
    state: MachineState
    start_time: datetime
    end_time: datetime | None = None

    def __post_init__(self) -> None:
        if self.end_time is not None and self.end_time < self.start_time:
            raise ValueError(f"log {self.log_id} ends before it starts")


@dataclass(frozen=True, slots=True)
class ProductionRecord:
    """Operator-entered production counts for one machine, date and shift."""

    machine_id: str
    date: date
    shift: Shift
    output_qty: int
    defect_qty: int
    planned_runtime: float = 0.0
    actual_runtime: float = 0.0
    ideal_runtime: float = 0.0
    record_id: str | None = None

    def __post_init__(self) -> None:
        if self.output_qty < 0:
            raise ValueError("output_qty must be >= 0")
        if self.defect_qty < 0:
            raise ValueError("defect_qty must be >= 0")
        for field_name in ("planned_runtime", "actual_runtime", "ideal_runtime"):
            if getattr(self, field_name) < 0.0:
                raise ValueError(f"{field_name} must be >= 0")


@dataclass(frozen=True, slots=True)
class ShiftOEE:
    """Computed OEE for one (machine, date, shift) tuple."""

    machine_id: str
    date: date
    shift: Shift
    metrics: OEEMetrics
