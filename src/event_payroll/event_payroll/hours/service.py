from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..common.datetime_utils import break_duration_hours, round2
from ..events.model import Event
from .factory import HoursCalculatorFactory


@dataclass(frozen=True)
class HoursBreakdown:
    gross_hours: float
    break_hours_per_day: float
    day_count: int
    net_hours: float

    def to_dict(self) -> dict:
        return {
            "gross_hours": round2(self.gross_hours),
            "break_hours_per_day": self.break_hours_per_day,
            "day_count": self.day_count,
            "net_hours": self.net_hours,
        }


def net_hours(gross_hours: float, break_hours_per_day: float, day_count: int) -> float:
    """Gross hours minus one break per event day, never below zero."""
    total_break = break_hours_per_day * day_count
    return max(0.0, round2(gross_hours - total_break))


def compute_breakdown(event: Event, factory: Optional[HoursCalculatorFactory] = None) -> HoursBreakdown:
    factory = factory or HoursCalculatorFactory()
    gross = factory.for_event(event).gross_hours(event)
    per_day = break_duration_hours(event.break_start, event.break_end)
    days = event.day_count
    return HoursBreakdown(
        gross_hours=gross,
        break_hours_per_day=per_day,
        day_count=days,
        net_hours=net_hours(gross, per_day, days),
    )
