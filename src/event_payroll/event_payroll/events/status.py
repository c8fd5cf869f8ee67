"""Clock-dependent status rules applied before payroll is calculated.

The current time is always passed in, so the payroll engine itself stays
free of wall-clock reads.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime

from ..assignments.model import Assignment
from ..core.enums import AttendanceStatus, EventStatus
from .model import Event


def is_past(event: Event, now: datetime) -> bool:
    return event.end < now


def normalize_event_status(event: Event, now: datetime) -> EventStatus:
    """A past event that was not cancelled counts as completed."""
    if is_past(event, now) and event.status != EventStatus.CANCELLED:
        return EventStatus.COMPLETED
    return event.status


def default_attendance(event: Event, assignment: Assignment, now: datetime) -> AttendanceStatus:
    """Unset attendance on a completed past event defaults to present."""
    if assignment.attendance != AttendanceStatus.UNSET:
        return assignment.attendance
    if is_past(event, now) and normalize_event_status(event, now) == EventStatus.COMPLETED:
        return AttendanceStatus.PRESENT
    return AttendanceStatus.UNSET


def normalize(event: Event, assignment: Assignment, now: datetime) -> tuple[Event, Assignment]:
    status = normalize_event_status(event, now)
    attendance = default_attendance(event, assignment, now)

    if status != event.status:
        event = replace(event, status=status)
    if attendance != assignment.attendance:
        assignment = replace(assignment, attendance=attendance)
    return event, assignment
