"""Fixed quality bands shared by numeric classification and color coding."""

from __future__ import annotations

from dataclasses import dataclass

from oeewatch.domain.models import PerformanceLevel, StatusColor


@dataclass(frozen=True, slots=True)
class QualityBands:
    """Lower bounds (inclusive) of the excellent and good bands."""

    excellent: float = 0.85
    good: float = 0.65

    def __post_init__(self) -> None:
        if not 0.0 <= self.good <= self.excellent <= 1.0:
            raise ValueError("bands must satisfy 0 <= good <= excellent <= 1")


QUALITY_BANDS = QualityBands()

_LEVEL_COLORS: dict[PerformanceLevel, StatusColor] = {
    PerformanceLevel.EXCELLENT: StatusColor.SUCCESS,
    PerformanceLevel.GOOD: StatusColor.WARNING,
    PerformanceLevel.NEEDS_IMPROVEMENT: StatusColor.ERROR,
}


def classify(value: float, *, bands: QualityBands = QUALITY_BANDS) -> PerformanceLevel:
    """Place an OEE or factor ratio into its performance band."""
    if value >= bands.excellent:
        return PerformanceLevel.EXCELLENT
    if value >= bands.good:
        return PerformanceLevel.GOOD
    return PerformanceLevel.NEEDS_IMPROVEMENT


def color_for(value: float, *, bands: QualityBands = QUALITY_BANDS) -> StatusColor:
    """Presentation color for a ratio, on the same boundaries as `classify`."""
    return _LEVEL_COLORS[classify(value, bands=bands)]
