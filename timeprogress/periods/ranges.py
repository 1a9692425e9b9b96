"""Calendar period boundaries.

Every period is a half-open interval ``[start, end)`` built from the
wall-clock components of ``now`` (year, month, day, weekday).  No timezone
conversion is performed: an aware ``now`` keeps its ``tzinfo`` and a naive
one stays naive.

Periods
-------
DAY     midnight of today → midnight of tomorrow
WEEK    Monday midnight → the following Monday midnight
MONTH   the 1st of this month → the 1st of next month
YEAR    Jan 1 → Jan 1 of next year
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum


logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class TimePeriod(Enum):
    """The calendar unit being tracked.  Values double as display labels."""

    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"
    YEAR = "Year"

    @property
    def label(self) -> str:
        return self.value


DAYS_PER_WEEK = 7


# ── interval ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Interval:
    """Half-open time range ``[start, end)``."""

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(
                f"interval end {self.end!r} must be after start {self.start!r}"
            )

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    def __contains__(self, instant: datetime) -> bool:
        return self.start <= instant < self.end


# ── boundaries ────────────────────────────────────────────────────────────


def start_of_day(now: datetime) -> datetime:
    """Midnight of *now*'s calendar date."""
    return now.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_week(now: datetime) -> datetime:
    """Monday midnight of the week containing *now*.

    ``datetime.weekday()`` already maps Monday to 0, which is the same as
    ``(weekday + 6) % 7`` for a Sunday-first numbering.
    """
    return start_of_day(now) - timedelta(days=now.weekday())


def start_of_month(now: datetime) -> datetime:
    return start_of_day(now).replace(day=1)


def start_of_next_month(now: datetime) -> datetime:
    first = start_of_month(now)
    if first.month == 12:
        return first.replace(year=first.year + 1, month=1)
    return first.replace(month=first.month + 1)


def start_of_year(now: datetime) -> datetime:
    return start_of_month(now).replace(month=1)


def time_range(now: datetime, period: TimePeriod) -> Interval:
    """Return the interval of *period* that contains *now*."""
    if period is TimePeriod.DAY:
        start = start_of_day(now)
        end = start + timedelta(days=1)
    elif period is TimePeriod.WEEK:
        start = start_of_week(now)
        end = start + timedelta(days=DAYS_PER_WEEK)
    elif period is TimePeriod.MONTH:
        start = start_of_month(now)
        end = start_of_next_month(now)
    else:
        start = start_of_year(now)
        end = start.replace(year=start.year + 1)

    logger.debug("%s range for %s: [%s, %s)", period.label, now, start, end)
    return Interval(start, end)
