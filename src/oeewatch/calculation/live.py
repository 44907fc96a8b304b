"""In-shift OEE for machines that are still running, with a short-lived cache."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Callable, Sequence

from oeewatch.calculation.oee import (
    calculate_actual_runtime_from_logs,
    calculate_ideal_runtime,
    calculate_metrics,
    calculate_planned_runtime,
)
from oeewatch.config.settings import ShiftSettings
from oeewatch.domain.models import MachineLog, OEEMetrics
from oeewatch.shifts.schedule import current_shift, should_notify_shift_end

logger = logging.getLogger(__name__)

DEFAULT_CACHE_TTL_SECONDS = 300.0
LIVE_BUCKET_SECONDS = 10


class OEECache:
    """In-memory TTL cache for computed OEE metrics."""

    def __init__(
        self,
        *,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl_seconds <= 0.0:
            raise ValueError("ttl_seconds must be > 0")
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, tuple[OEEMetrics, float]] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str) -> OEEMetrics | None:
        entry = self._entries.get(key)
        if entry is None:
            return None
        metrics, stored_at = entry
        if self._clock() - stored_at > self._ttl_seconds:
            del self._entries[key]
            return None
        return metrics

    def set(self, key: str, metrics: OEEMetrics) -> None:
        self._entries[key] = (metrics, self._clock())

    def delete(self, key: str) -> None:
        self._entries.pop(key, None)

    def clear(self) -> None:
        self._entries.clear()

    def cleanup(self) -> int:
        """Drop expired entries and return how many were removed."""
        now = self._clock()
        expired = [key for key, (_, stored_at) in self._entries.items() if now - stored_at > self._ttl_seconds]
        for key in expired:
            del self._entries[key]
        return len(expired)


class LiveOEECalculator:
    """Compute OEE for the shift in progress from machine logs and running counts."""

    def __init__(self, settings: ShiftSettings, *, cache: OEECache | None = None) -> None:
        self._settings = settings
        self._cache = cache if cache is not None else OEECache()

    def calculate(
        self,
        machine_id: str,
        logs: Sequence[MachineLog],
        *,
        now: datetime,
        output_qty: int = 0,
        defect_qty: int = 0,
        tact_time: float | None = None,
    ) -> OEEMetrics:
        """Metrics from the current shift start up to `now`, cached per 10-second bucket.

        The cache key covers the counts and tact time but not `logs`: a log that
        changes inside the same bucket is picked up on the next bucket.
        """
        bucket = int(now.timestamp()) // LIVE_BUCKET_SECONDS
        cache_key = f"live_{machine_id}_{bucket}_{output_qty}_{defect_qty}_{tact_time}"
        cached = self._cache.get(cache_key)
        if cached is not None:
            return cached

        window = current_shift(now).limited_to(self._settings.shift_hours)
        actual_runtime = calculate_actual_runtime_from_logs(logs, window.start, min(now, window.end))
        elapsed_minutes = max(0.0, (now - window.start).total_seconds() / 60.0)
        planned_runtime = min(
            elapsed_minutes,
            calculate_planned_runtime(self._settings.shift_hours, self._settings.break_minutes),
        )
        effective_tact = tact_time if tact_time is not None else self._settings.default_tact_time

        metrics = calculate_metrics(
            actual_runtime=actual_runtime,
            planned_runtime=planned_runtime,
            ideal_runtime=calculate_ideal_runtime(output_qty, effective_tact),
            output_qty=output_qty,
            defect_qty=defect_qty,
        )
        logger.debug(
            "live OEE for %s in shift %s: oee=%.4f runtime=%.1f/%.1f min",
            machine_id,
            window.shift.value,
            metrics.oee,
            actual_runtime,
            planned_runtime,
        )
        self._cache.cleanup()
        self._cache.set(cache_key, metrics)
        return metrics

    def shift_end_notice_due(self, now: datetime) -> bool:
        """Whether the configured shift-end reminder should show at `now`."""
        return should_notify_shift_end(now, lead_minutes=self._settings.shift_end_notice_minutes)
