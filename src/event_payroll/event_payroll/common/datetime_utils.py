from __future__ import annotations

import logging
import math
from datetime import date, datetime, time, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterator, Optional, Union

from ..core.constants import HOURS_PRECISION

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp (``2024-03-04T09:00``) or a bare date.

    Offset-aware values are converted to naive local time.
    """
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def parse_time_of_day(value: Optional[str]) -> Optional[time]:
    """Parse ``HH:MM`` (seconds tolerated). Returns None when malformed."""
    if not value:
        return None
    try:
        parts = [int(p) for p in str(value).strip().split(":")]
        if len(parts) >= 2:
            return time(parts[0], parts[1])
    except (TypeError, ValueError):
        pass
    logger.warning("Ignoring malformed time of day %r", value)
    return None


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def to_date(value: DateLike) -> date:
    """Drop the time-of-day component (midnight normalisation)."""
    if isinstance(value, datetime):
        return value.date()
    return value


def iter_dates(start: DateLike, end: DateLike) -> Iterator[date]:
    """Yield every calendar date from start to end, both inclusive."""
    current = to_date(start)
    last = to_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def inclusive_day_count(start: DateLike, end: DateLike) -> int:
    """Number of calendar days touched by [start, end], never below 1."""
    diff = to_date(end) - to_date(start)
    days = math.ceil(diff.total_seconds() / 86400) + 1
    return max(days, 1)


def round2(value: float, places: int = HOURS_PRECISION) -> float:
    """Round half-up to a fixed number of decimals.

    Non-finite values (inf, nan) come back as 0.0.
    """
    if not math.isfinite(value):
        return 0.0
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def break_duration_hours(break_start: Optional[str], break_end: Optional[str]) -> float:
    """Length of a daily break window in hours.

    A window that ends at or before it starts (including one crossing
    midnight) counts as no break.
    """
    start = parse_time_of_day(break_start)
    end = parse_time_of_day(break_end)
    if start is None or end is None:
        return 0.0

    diff_minutes = minutes_of_day(end) - minutes_of_day(start)
    if diff_minutes <= 0:
        return 0.0
    return round2(diff_minutes / 60)


def combine_date_and_time(day: DateLike, time_of_day: str) -> datetime:
    """Set hour and minute on a date, zeroing seconds and microseconds."""
    parsed = parse_time_of_day(time_of_day) or time(0, 0)
    return datetime.combine(to_date(day), parsed)
