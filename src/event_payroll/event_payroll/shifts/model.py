from __future__ import annotations

from dataclasses import dataclass

from ..common.datetime_utils import minutes_of_day, parse_time_of_day


@dataclass(frozen=True)
class WorkShiftTemplate:
    """Recurring shift: which days it runs and its HH:MM window.

    ``day_token`` is kept as stored; it is resolved when days are counted.
    """

    day_token: str
    shift_start: str
    shift_end: str

    def duration_hours(self) -> float:
        """Hours of one occurrence; an end before the start wraps past midnight."""
        start = parse_time_of_day(self.shift_start)
        end = parse_time_of_day(self.shift_end)
        if start is None or end is None:
            return 0.0

        start_min = minutes_of_day(start)
        end_min = minutes_of_day(end)
        if end_min >= start_min:
            return (end_min - start_min) / 60
        return (24 * 60 - start_min + end_min) / 60
