from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import round2
from ..core.enums import COUNTED_ATTENDANCE, AttendanceStatus


@dataclass(frozen=True)
class PayrollCalculation:
    """Derived payroll figures for one assignment. Never persisted as source of truth."""

    event_id: int
    operator_id: int
    event_title: str
    start: datetime
    end: datetime
    attendance: AttendanceStatus
    gross_hours: float
    net_hours: float
    effective_hours: float
    event_day_count: int
    break_hours_per_day: float
    hourly_rate_cost: float
    hourly_rate_sell: float
    compensation: float
    meal_allowance: float
    travel_allowance: float
    total_revenue: float
    actual_hours: Optional[float] = None
    client: Optional[str] = None
    operator_name: Optional[str] = None

    @property
    def allowances(self) -> float:
        return self.meal_allowance + self.travel_allowance

    @property
    def is_counted(self) -> bool:
        return self.attendance in COUNTED_ATTENDANCE

    def to_dict(self) -> dict:
        return {
            "event_id": self.event_id,
            "operator_id": self.operator_id,
            "operator_name": self.operator_name or "-",
            "event_title": self.event_title,
            "client": self.client or "-",
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "date": self.start.strftime("%Y-%m-%d"),
            "attendance": self.attendance.value,
            "counted": self.is_counted,
            "gross_hours": round2(self.gross_hours),
            "net_hours": self.net_hours,
            "actual_hours": self.actual_hours,
            "effective_hours": round2(self.effective_hours),
            "event_day_count": self.event_day_count,
            "break_hours_per_day": self.break_hours_per_day,
            "hourly_rate_cost": self.hourly_rate_cost,
            "hourly_rate_sell": self.hourly_rate_sell,
            "compensation": self.compensation,
            "meal_allowance": self.meal_allowance,
            "travel_allowance": self.travel_allowance,
            "total_revenue": self.total_revenue,
        }


@dataclass(frozen=True)
class PayrollSummary:
    total_gross_hours: float = 0.0
    total_net_hours: float = 0.0
    total_compensation: float = 0.0
    total_allowances: float = 0.0
    total_revenue: float = 0.0
    counted_entries: int = 0

    def combine(self, other: "PayrollSummary") -> "PayrollSummary":
        """Merge two partial summaries (e.g. computed over separate chunks)."""
        return PayrollSummary(
            total_gross_hours=self.total_gross_hours + other.total_gross_hours,
            total_net_hours=self.total_net_hours + other.total_net_hours,
            total_compensation=self.total_compensation + other.total_compensation,
            total_allowances=self.total_allowances + other.total_allowances,
            total_revenue=self.total_revenue + other.total_revenue,
            counted_entries=self.counted_entries + other.counted_entries,
        )

    def to_dict(self) -> dict:
        return {
            "total_gross_hours": round2(self.total_gross_hours),
            "total_net_hours": round2(self.total_net_hours),
            "total_compensation": round2(self.total_compensation),
            "total_allowances": round2(self.total_allowances),
            "total_revenue": round2(self.total_revenue),
            "counted_entries": self.counted_entries,
        }
