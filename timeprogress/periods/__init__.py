"""Periods package."""

from .ranges import (
    TimePeriod,
    Interval,
    time_range,
    start_of_day,
    start_of_week,
    start_of_month,
    start_of_next_month,
    start_of_year,
)
from .progress import (
    ProgressRecord,
    PERIOD_COLORS,
    clamp01,
    progress_fraction,
    percent_label,
    build_records,
)

__all__ = [
    "TimePeriod",
    "Interval",
    "time_range",
    "start_of_day",
    "start_of_week",
    "start_of_month",
    "start_of_next_month",
    "start_of_year",
    "ProgressRecord",
    "PERIOD_COLORS",
    "clamp01",
    "progress_fraction",
    "percent_label",
    "build_records",
]
