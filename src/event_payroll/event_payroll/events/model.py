from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import inclusive_day_count
from ..core.enums import EventStatus
from ..shifts.model import WorkShiftTemplate


@dataclass(frozen=True)
class Event:
    """A scheduled engagement spanning one or more calendar days.

    The break window (HH:MM) applies once per calendar day of the span.
    """

    event_id: int
    title: str
    start: datetime
    end: datetime
    break_start: Optional[str] = None
    break_end: Optional[str] = None
    work_shifts: tuple[WorkShiftTemplate, ...] = ()
    status: EventStatus = EventStatus.UPCOMING
    client: Optional[str] = None

    @property
    def day_count(self) -> int:
        return inclusive_day_count(self.start, self.end)

    @property
    def has_work_shifts(self) -> bool:
        return len(self.work_shifts) > 0
