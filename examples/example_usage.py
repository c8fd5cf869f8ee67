"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the payroll rules live in the services.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from event_payroll.assignments.model import Assignment
from event_payroll.container import build_container
from event_payroll.events.model import Event
from event_payroll.shifts.model import WorkShiftTemplate


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=vars(settings))

    fair = Event(
        event_id=1,
        title="Trade fair",
        start=datetime(2024, 3, 4, 9, 0),
        end=datetime(2024, 3, 8, 18, 0),
        break_start="13:00",
        break_end="14:00",
        work_shifts=(WorkShiftTemplate("weekday-range", "09:00", "18:00"),),
    )
    crew = [Assignment(operator_id=1, event_id=1, hourly_rate_cost=15), Assignment(operator_id=2, event_id=1)]

    report = container.payroll_report_service.build_report([(fair, a) for a in crew], now=datetime.now())
    for row in report.rows:
        print(row)
    print(report.summary.to_dict())


if __name__ == "__main__":
    main()
