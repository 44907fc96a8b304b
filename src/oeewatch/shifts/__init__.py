"""Shift calendar helpers."""

from oeewatch.shifts.schedule import (
    SHIFT_A_START,
    SHIFT_B_START,
    ShiftWindow,
    current_shift,
    format_shift_window,
    minutes_until_shift_end,
    production_date,
    shift_time_ranges,
    should_notify_shift_end,
)

__all__ = [
    "SHIFT_A_START",
    "SHIFT_B_START",
    "ShiftWindow",
    "current_shift",
    "format_shift_window",
    "minutes_until_shift_end",
    "production_date",
    "shift_time_ranges",
    "should_notify_shift_end",
]
