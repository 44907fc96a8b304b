"""Tests for the two-shift production calendar."""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest

from oeewatch.domain import Shift
from oeewatch.shifts import (
    ShiftWindow,
    current_shift,
    format_shift_window,
    minutes_until_shift_end,
    production_date,
    shift_time_ranges,
    should_notify_shift_end,
)


def test_shift_time_ranges_cover_the_day() -> None:
    windows = shift_time_ranges(date(2024, 1, 31))

    assert windows[Shift.A].start == datetime(2024, 1, 31, 8, 0)
    assert windows[Shift.A].end == datetime(2024, 1, 31, 20, 0)
    assert windows[Shift.B].start == datetime(2024, 1, 31, 20, 0)
    assert windows[Shift.B].end == datetime(2024, 2, 1, 8, 0)
    assert windows[Shift.B].duration_minutes == 720.0


def test_current_shift_day_and_night() -> None:
    assert current_shift(datetime(2024, 1, 1, 8, 0)).shift == Shift.A
    assert current_shift(datetime(2024, 1, 1, 19, 59)).shift == Shift.A
    assert current_shift(datetime(2024, 1, 1, 20, 0)).shift == Shift.B


def test_early_morning_belongs_to_previous_night_shift() -> None:
    window = current_shift(datetime(2024, 1, 2, 3, 0))

    assert window.shift == Shift.B
    assert window.start == datetime(2024, 1, 1, 20, 0)
    assert production_date(datetime(2024, 1, 2, 3, 0)) == date(2024, 1, 1)


def test_timezone_aware_moment_keeps_timezone() -> None:
    window = current_shift(datetime(2024, 1, 1, 12, 0, tzinfo=UTC))

    assert window.start.tzinfo is UTC


def test_minutes_until_shift_end_and_notice() -> None:
    assert minutes_until_shift_end(datetime(2024, 1, 1, 19, 50)) == 10
    assert should_notify_shift_end(datetime(2024, 1, 1, 19, 50)) is True
    assert should_notify_shift_end(datetime(2024, 1, 1, 19, 30)) is False
    assert should_notify_shift_end(datetime(2024, 1, 1, 19, 30), lead_minutes=30) is True


def test_format_shift_window() -> None:
    window = shift_time_ranges(date(2024, 1, 1))[Shift.B]

    assert format_shift_window(window) == "B (20:00 - 08:00)"


def test_shift_window_must_end_after_start() -> None:
    with pytest.raises(ValueError, match="end must be after start"):
        ShiftWindow(shift=Shift.A, start=datetime(2024, 1, 1, 20), end=datetime(2024, 1, 1, 8))


def test_limited_window_keeps_start_and_caps_end() -> None:
    window = shift_time_ranges(date(2024, 1, 1))[Shift.B]

    short = window.limited_to(8)
    assert short.start == datetime(2024, 1, 1, 20, 0)
    assert short.end == datetime(2024, 1, 2, 4, 0)
    assert window.limited_to(24) == window
