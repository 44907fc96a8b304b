"""Domain models for machines, production records and OEE values."""

from oeewatch.domain.models import (
    Machine,
    MachineLog,
    MachineState,
    OEEMetrics,
    PerformanceLevel,
    ProductionRecord,
    Shift,
    ShiftOEE,
    StatusColor,
)

__all__ = [
    "Machine",
    "MachineLog",
    "MachineState",
    "OEEMetrics",
    "PerformanceLevel",
    "ProductionRecord",
    "Shift",
    "ShiftOEE",
    "StatusColor",
]
