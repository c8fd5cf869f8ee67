from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Iterable, Optional

from ..assignments.model import Assignment
from ..common.validators import optional_non_negative
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..events.model import Event
from ..events.status import normalize
from .engine import PayrollEngine
from .model import PayrollCalculation, PayrollSummary
from .summary import summarize

logger = logging.getLogger(__name__)

_UNCHANGED = object()


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    summary: PayrollSummary
    calculations: list[PayrollCalculation]


class PayrollReportService:
    def __init__(self, engine: Optional[PayrollEngine] = None):
        self._engine = engine or PayrollEngine()

    @property
    def engine(self) -> PayrollEngine:
        return self._engine

    def calculate(self, event: Event, assignment: Assignment, *, now: datetime) -> PayrollCalculation:
        event, assignment = normalize(event, assignment, now)
        return self._engine.calculate(event, assignment)

    def build_report(self, entries: Iterable[tuple[Event, Assignment]], *, now: datetime) -> ReportData:
        """Payroll rows for every entry plus totals over the counted ones.

        Rows for absent or unset attendance stay in the listing; they are
        only left out of the summary.
        """
        calculations = [self.calculate(event, assignment, now=now) for event, assignment in entries]
        calculations.sort(key=lambda c: (c.start, c.event_id, c.operator_id))

        summary = summarize(calculations)
        logger.debug(
            "Payroll report: %d rows, %d counted, compensation=%.2f",
            len(calculations),
            summary.counted_entries,
            summary.total_compensation,
        )
        return ReportData(rows=[c.to_dict() for c in calculations], summary=summary, calculations=calculations)

    def adjust(
        self,
        event: Event,
        assignment: Assignment,
        *,
        now: datetime,
        actual_hours=_UNCHANGED,
        meal_allowance=_UNCHANGED,
        travel_allowance=_UNCHANGED,
        attendance=_UNCHANGED,
    ) -> tuple[Assignment, PayrollCalculation]:
        """Apply a manual correction and recalculate.

        Passing None clears an override so the default applies again.
        Returns the updated assignment for the caller to store.
        """
        changes: dict = {}
        if actual_hours is not _UNCHANGED:
            changes["actual_hours"] = optional_non_negative(actual_hours, "actual_hours")
        if meal_allowance is not _UNCHANGED:
            changes["meal_allowance"] = optional_non_negative(meal_allowance, "meal_allowance")
        if travel_allowance is not _UNCHANGED:
            changes["travel_allowance"] = optional_non_negative(travel_allowance, "travel_allowance")
        if attendance is not _UNCHANGED:
            changes["attendance"] = _require_attendance(attendance)

        if assignment.event_id != event.event_id:
            raise ValidationError("Assignment does not belong to this event")

        updated = replace(assignment, **changes)
        return updated, self.calculate(event, updated, now=now)


def _require_attendance(value) -> AttendanceStatus:
    if value is None or value == "":
        return AttendanceStatus.UNSET
    try:
        return AttendanceStatus(str(value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown attendance status: {value}") from None
