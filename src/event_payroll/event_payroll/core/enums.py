from __future__ import annotations

from enum import Enum
from typing import Optional


class DayToken(str, Enum):
    """Which calendar days a recurring work shift applies to."""

    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"
    SUNDAY = "sunday"
    WEEKDAYS = "weekday-range"
    WEEKEND = "weekend-range"
    ALL_DAYS = "all-days"

    @classmethod
    def parse(cls, value) -> Optional["DayToken"]:
        """Resolve a stored token, including the legacy Italian labels.

        Returns None for anything unrecognised.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        key = value.strip().lower()
        try:
            return cls(key)
        except ValueError:
            return _LEGACY_DAY_TOKENS.get(key)

    @property
    def weekday(self) -> Optional[int]:
        """Python weekday number (Monday=0) for single-day tokens."""
        return _WEEKDAY_NUMBERS.get(self)


_WEEKDAY_NUMBERS = {
    DayToken.MONDAY: 0,
    DayToken.TUESDAY: 1,
    DayToken.WEDNESDAY: 2,
    DayToken.THURSDAY: 3,
    DayToken.FRIDAY: 4,
    DayToken.SATURDAY: 5,
    DayToken.SUNDAY: 6,
}

_LEGACY_DAY_TOKENS = {
    "lunedi": DayToken.MONDAY,
    "martedi": DayToken.TUESDAY,
    "mercoledi": DayToken.WEDNESDAY,
    "giovedi": DayToken.THURSDAY,
    "venerdi": DayToken.FRIDAY,
    "sabato": DayToken.SATURDAY,
    "domenica": DayToken.SUNDAY,
    "lunedi-venerdi": DayToken.WEEKDAYS,
    "sabato-domenica": DayToken.WEEKEND,
    "tutti": DayToken.ALL_DAYS,
}


class AttendanceStatus(str, Enum):
    """Recorded presence outcome for one operator on one event."""

    UNSET = "unset"
    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value) -> "AttendanceStatus":
        if isinstance(value, cls):
            return value
        if not value:
            return cls.UNSET
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UNSET


# Only these statuses contribute to payroll totals.
COUNTED_ATTENDANCE = frozenset(
    {AttendanceStatus.PRESENT, AttendanceStatus.LATE, AttendanceStatus.COMPLETED}
)


class EventStatus(str, Enum):
    """Lifecycle status of an event."""

    UPCOMING = "upcoming"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    @classmethod
    def parse(cls, value) -> "EventStatus":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.UPCOMING
