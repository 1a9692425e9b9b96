"""Elapsed-time fractions and the per-render progress records."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import datetime
from typing import Mapping

from .ranges import Interval, TimePeriod, time_range


logger = logging.getLogger(__name__)


# ── palette ───────────────────────────────────────────────────────────────

PERIOD_COLORS: dict[TimePeriod, str] = {
    TimePeriod.DAY:   "#FF3B30",   # red
    TimePeriod.WEEK:  "#FF9500",   # orange
    TimePeriod.MONTH: "#AF52DE",   # purple
    TimePeriod.YEAR:  "#5AC8FA",   # teal blue
}


# ── record ────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ProgressRecord:
    """One gauge's worth of data: label, clamped fraction and hex colour."""

    label: str
    fraction: float
    color: str

    @property
    def percent_text(self) -> str:
        return percent_label(self.fraction)


# ── math ──────────────────────────────────────────────────────────────────


def clamp01(value: float) -> float:
    return max(0.0, min(value, 1.0))


def progress_fraction(now: datetime, interval: Interval) -> float:
    """Elapsed share of *interval* at *now*, clamped to [0, 1].

    Instants before the start give 0.0, instants at or after the end 1.0.
    """
    total = (interval.end - interval.start).total_seconds()
    assert total > 0, "interval end must be after start"
    elapsed = (now - interval.start).total_seconds()
    return clamp01(elapsed / total)


def percent_label(fraction: float) -> str:
    """0.6429 → '64%'.  Always rounds down."""
    return f"{math.floor(fraction * 100)}%"


def build_records(
    now: datetime,
    colors: Mapping[TimePeriod, str] = PERIOD_COLORS,
) -> list[ProgressRecord]:
    """Compute Day, Week, Month and Year records (in that order) for *now*."""
    records = [
        ProgressRecord(
            label=period.label,
            fraction=progress_fraction(now, time_range(now, period)),
            color=colors[period],
        )
        for period in TimePeriod
    ]
    logger.debug(
        "Records for %s: %s",
        now,
        ", ".join(f"{r.label}={r.fraction:.4f}" for r in records),
    )
    return records
