from __future__ import annotations

from .base import HoursCalculator
from ...events.model import Event


class SpanHoursCalculator(HoursCalculator):
    """Continuous rule: end - start, across however many days it spans."""

    def gross_hours(self, event: Event) -> float:
        hours = (event.end - event.start).total_seconds() / 3600
        return max(hours, 0.0)
