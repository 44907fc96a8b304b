"""Two-shift production calendar: A runs 08:00-20:00, B runs 20:00-08:00."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo

from oeewatch.domain.models import Shift

SHIFT_A_START = time(8, 0)
SHIFT_B_START = time(20, 0)


@dataclass(frozen=True, slots=True)
class ShiftWindow:
    """Half-open time window [start, end) covered by one shift."""

    shift: Shift
    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError("shift window end must be after start")

    @property
    def duration_minutes(self) -> float:
        return (self.end - self.start).total_seconds() / 60.0

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment < self.end

    def limited_to(self, hours: float) -> ShiftWindow:
        """Working part of the window: the first `hours` after the shift starts."""
        end = min(self.end, self.start + timedelta(hours=hours))
        return ShiftWindow(shift=self.shift, start=self.start, end=end)


def shift_time_ranges(day: date, *, tz: tzinfo | None = None) -> dict[Shift, ShiftWindow]:
    """Return the A and B windows that belong to production date `day`."""
    next_day = day + timedelta(days=1)
    a_start = datetime.combine(day, SHIFT_A_START, tzinfo=tz)
    b_start = datetime.combine(day, SHIFT_B_START, tzinfo=tz)
    return {
        Shift.A: ShiftWindow(shift=Shift.A, start=a_start, end=b_start),
        Shift.B: ShiftWindow(
            shift=Shift.B,
            start=b_start,
            end=datetime.combine(next_day, SHIFT_A_START, tzinfo=tz),
        ),
    }


def production_date(moment: datetime) -> date:
    """Production date a moment is booked against."""
    if moment.time() < SHIFT_A_START:
        return moment.date() - timedelta(days=1)
    return moment.date()


def current_shift(now: datetime) -> ShiftWindow:
    """Shift window containing `now`; early-morning hours belong to the prior day's B shift."""
    windows = shift_time_ranges(production_date(now), tz=now.tzinfo)
    if windows[Shift.A].contains(now):
        return windows[Shift.A]
    return windows[Shift.B]


def minutes_until_shift_end(now: datetime) -> int:
    """Whole minutes left in the current shift, never negative."""
    remaining = current_shift(now).end - now
    return max(0, int(remaining.total_seconds() // 60))


def should_notify_shift_end(now: datetime, *, lead_minutes: int = 15) -> bool:
    """Whether the shift-end reminder should be visible at `now`."""
    remaining = minutes_until_shift_end(now)
    return 0 < remaining <= lead_minutes


def format_shift_window(window: ShiftWindow) -> str:
    """Display label such as `A (08:00 - 20:00)`."""
    return f"{window.shift.value} ({window.start:%H:%M} - {window.end:%H:%M})"
