"""Build domain records from JSON payloads.

Keys are accepted in snake_case and in the camelCase the event forms use.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional

from ..assignments.model import Assignment
from ..common.datetime_utils import combine_date_and_time, parse_iso_datetime, parse_time_of_day
from ..common.validators import optional_non_negative
from ..core.enums import AttendanceStatus, EventStatus
from ..core.exceptions import ValidationError
from ..events.model import Event
from ..shifts.model import WorkShiftTemplate


def _pick(data: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = data.get(key)
        if value is not None and value != "":
            return value
    return None


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValidationError(f"{what} must be an object")
    return data


def _require_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid") from None


def _instant(data: Mapping[str, Any], date_keys: tuple[str, ...], time_keys: tuple[str, ...], field_name: str) -> datetime:
    raw = _pick(data, *date_keys)
    if raw is None:
        raise ValidationError(f"{field_name} is required")
    try:
        value = parse_iso_datetime(str(raw))
    except ValueError:
        raise ValidationError(f"{field_name} is not a valid date") from None

    time_of_day = _pick(data, *time_keys)
    if time_of_day is not None:
        if parse_time_of_day(str(time_of_day)) is None:
            raise ValidationError(f"{field_name} time is not HH:MM")
        value = combine_date_and_time(value, str(time_of_day))
    return value


def parse_work_shift(data: Any) -> WorkShiftTemplate:
    data = _require_mapping(data, "work shift")
    day_token = _pick(data, "day_token", "dayToken", "dayOfWeek", "day_of_week")
    start = _pick(data, "shift_start", "shiftStart", "startTime", "start_time")
    end = _pick(data, "shift_end", "shiftEnd", "endTime", "end_time")
    if day_token is None or start is None or end is None:
        raise ValidationError("work shift needs a day, a start and an end time")
    return WorkShiftTemplate(day_token=str(day_token), shift_start=str(start), shift_end=str(end))


def parse_event(data: Any) -> Event:
    data = _require_mapping(data, "event")

    start = _instant(data, ("start", "start_date", "startDate"), ("start_time", "startTime"), "start")
    end = _instant(data, ("end", "end_date", "endDate"), ("end_time", "endTime"), "end")
    if end <= start:
        raise ValidationError("end must be after start")

    shifts = _pick(data, "work_shifts", "workShifts") or []
    if not isinstance(shifts, list):
        raise ValidationError("work_shifts must be a list")

    return Event(
        event_id=_require_int(_pick(data, "event_id", "eventId", "id") or 0, "event_id"),
        title=str(_pick(data, "title") or ""),
        start=start,
        end=end,
        break_start=_pick(data, "break_start", "breakStartTime", "breakStart"),
        break_end=_pick(data, "break_end", "breakEndTime", "breakEnd"),
        work_shifts=tuple(parse_work_shift(s) for s in shifts),
        status=EventStatus.parse(_pick(data, "status")),
        client=_pick(data, "client"),
    )


def parse_assignment(data: Any, *, event_id: Optional[int] = None) -> Assignment:
    data = _require_mapping(data, "assignment")

    raw_event_id = _pick(data, "event_id", "eventId")
    return Assignment(
        operator_id=_require_int(_pick(data, "operator_id", "operatorId") or 0, "operator_id"),
        event_id=_require_int(raw_event_id, "event_id") if raw_event_id is not None else int(event_id or 0),
        hourly_rate_cost=optional_non_negative(
            _pick(data, "hourly_rate_cost", "hourlyRateCost", "hourly_rate"), "hourly_rate_cost"
        ),
        hourly_rate_sell=optional_non_negative(
            _pick(data, "hourly_rate_sell", "hourlyRateSell"), "hourly_rate_sell"
        ),
        actual_hours=optional_non_negative(_pick(data, "actual_hours", "actualHours"), "actual_hours"),
        attendance=AttendanceStatus.parse(_pick(data, "attendance", "attendance_status")),
        meal_allowance=optional_non_negative(_pick(data, "meal_allowance", "mealAllowance"), "meal_allowance"),
        travel_allowance=optional_non_negative(
            _pick(data, "travel_allowance", "travelAllowance"), "travel_allowance"
        ),
        gross_hours_override=optional_non_negative(
            _pick(data, "gross_hours", "grossHours", "total_hours"), "gross_hours"
        ),
        net_hours_override=optional_non_negative(_pick(data, "net_hours", "netHours"), "net_hours"),
        operator_name=_pick(data, "operator_name", "operatorName"),
    )


def parse_now(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    try:
        return parse_iso_datetime(str(value))
    except ValueError:
        raise ValidationError("now is not a valid timestamp") from None
