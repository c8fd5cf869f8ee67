from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class Assignment:
    """One operator booked on one event.

    ``None`` means "not set"; the payroll engine then falls back to its
    configured defaults. An explicit 0 is kept as 0.
    """

    operator_id: int
    event_id: int
    hourly_rate_cost: Optional[float] = None
    hourly_rate_sell: Optional[float] = None
    actual_hours: Optional[float] = None
    attendance: AttendanceStatus = AttendanceStatus.UNSET
    meal_allowance: Optional[float] = None
    travel_allowance: Optional[float] = None
    gross_hours_override: Optional[float] = None
    net_hours_override: Optional[float] = None
    operator_name: Optional[str] = None
