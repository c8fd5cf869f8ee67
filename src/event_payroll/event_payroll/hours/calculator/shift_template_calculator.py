from __future__ import annotations

from .base import HoursCalculator
from ...common.datetime_utils import round2
from ...events.model import Event
from ...shifts.days import matching_day_count


class ShiftTemplateHoursCalculator(HoursCalculator):
    """Recurring rule: each template's shift length times the days it applies to."""

    def gross_hours(self, event: Event) -> float:
        total = 0.0
        for shift in event.work_shifts:
            days = matching_day_count(shift.day_token, event.start, event.end)
            total += shift.duration_hours() * days
        return round2(total)
