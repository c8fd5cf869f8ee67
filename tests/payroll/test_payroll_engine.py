from datetime import datetime

import pytest

from event_payroll.assignments.model import Assignment
from event_payroll.events.model import Event
from event_payroll.payroll.config import PayrollRates
from event_payroll.payroll.engine import PayrollEngine
from event_payroll.shifts.model import WorkShiftTemplate


def _event(**kwargs) -> Event:
    values = dict(
        event_id=10,
        title="Trade fair",
        start=datetime(2024, 3, 4, 9, 0),
        end=datetime(2024, 3, 8, 18, 0),
        break_start="13:00",
        break_end="14:00",
        work_shifts=(WorkShiftTemplate("weekday-range", "09:00", "18:00"),),
    )
    values.update(kwargs)
    return Event(**values)


def test_net_hours_times_cost_rate():
    calc = PayrollEngine().calculate(_event(), Assignment(operator_id=1, event_id=10, hourly_rate_cost=15))

    assert calc.gross_hours == 45.0
    assert calc.event_day_count == 5
    assert calc.break_hours_per_day == 1.0
    assert calc.net_hours == 40.0
    assert calc.effective_hours == 40.0
    assert calc.compensation == 600.0
    assert calc.meal_allowance == 10.0
    assert calc.travel_allowance == 15.0
    assert calc.total_revenue == pytest.approx(40 * 15 * 1.667, abs=0.01)


def test_actual_hours_override_net_hours():
    assignment = Assignment(operator_id=1, event_id=10, hourly_rate_cost=15, actual_hours=38)
    calc = PayrollEngine().calculate(_event(), assignment)

    assert calc.net_hours == 40.0
    assert calc.actual_hours == 38
    assert calc.effective_hours == 38
    assert calc.compensation == 570.0


def test_stored_gross_hours_replace_computed():
    assignment = Assignment(operator_id=1, event_id=10, gross_hours_override=10)
    calc = PayrollEngine().calculate(_event(), assignment)

    assert calc.gross_hours == 10
    assert calc.net_hours == 5.0
    assert calc.meal_allowance == 10.0


def test_stored_net_hours_win():
    assignment = Assignment(operator_id=1, event_id=10, hourly_rate_cost=20, net_hours_override=30)
    calc = PayrollEngine().calculate(_event(), assignment)

    assert calc.net_hours == 30
    assert calc.compensation == 600.0


def test_fallback_rates_apply_when_unset():
    calc = PayrollEngine().calculate(_event(), Assignment(operator_id=1, event_id=10))

    assert calc.hourly_rate_cost == 15.0
    assert calc.hourly_rate_sell == pytest.approx(15.0 * 1.667)
    assert calc.compensation == 600.0


def test_explicit_sell_rate():
    assignment = Assignment(operator_id=1, event_id=10, hourly_rate_cost=15, hourly_rate_sell=30)
    assert PayrollEngine().calculate(_event(), assignment).total_revenue == 1200.0


def test_short_event_gets_no_meal_allowance():
    event = _event(end=datetime(2024, 3, 4, 13, 0), break_start=None, break_end=None, work_shifts=())
    calc = PayrollEngine().calculate(event, Assignment(operator_id=1, event_id=10))

    assert calc.gross_hours == 4.0
    assert calc.meal_allowance == 0.0


def test_explicit_zero_allowances_are_honoured():
    assignment = Assignment(operator_id=1, event_id=10, meal_allowance=0, travel_allowance=0)
    calc = PayrollEngine().calculate(_event(), assignment)

    assert calc.meal_allowance == 0.0
    assert calc.travel_allowance == 0.0
    assert calc.allowances == 0.0


def test_rates_are_configurable():
    rates = PayrollRates(default_hourly_rate_cost=20, default_travel_allowance=0, meal_allowance_amount=12)
    calc = PayrollEngine(rates).calculate(_event(), Assignment(operator_id=1, event_id=10))

    assert calc.compensation == 800.0
    assert calc.travel_allowance == 0.0
    assert calc.meal_allowance == 12.0


def test_bad_shift_template_degrades_to_zero_hours():
    event = _event(work_shifts=(WorkShiftTemplate("funday", "09:00", "18:00"),))
    calc = PayrollEngine().calculate(event, Assignment(operator_id=1, event_id=10, hourly_rate_cost=15))

    assert calc.gross_hours == 0.0
    assert calc.net_hours == 0.0
    assert calc.compensation == 0.0


def test_calculate_many_covers_every_operator():
    assignments = [Assignment(operator_id=i, event_id=10, hourly_rate_cost=10 + i) for i in (1, 2, 3)]
    calcs = PayrollEngine().calculate_many(_event(), assignments)

    assert [c.operator_id for c in calcs] == [1, 2, 3]
    assert [c.compensation for c in calcs] == [440.0, 480.0, 520.0]


def test_same_inputs_same_outputs():
    engine = PayrollEngine()
    assignment = Assignment(operator_id=1, event_id=10, hourly_rate_cost=15)
    assert engine.calculate(_event(), assignment) == engine.calculate(_event(), assignment)


def test_rates_from_settings():
    rates = PayrollRates.from_settings({"PAYROLL_SELL_MARGIN": "2", "PAYROLL_DEFAULT_TRAVEL_ALLOWANCE": 20})

    assert rates.sell_margin == 2.0
    assert rates.default_travel_allowance == 20.0
    assert rates.default_hourly_rate_cost == 15.0


def test_non_finite_stored_hours_do_not_crash():
    engine = PayrollEngine()

    calc = engine.calculate(_event(), Assignment(operator_id=1, event_id=10, gross_hours_override=float("inf")))
    assert calc.net_hours == 0.0
    assert calc.compensation == 0.0
    assert calc.to_dict()["gross_hours"] == 0.0

    calc = engine.calculate(_event(), Assignment(operator_id=1, event_id=10, actual_hours=float("nan")))
    assert calc.compensation == 0.0
    assert calc.total_revenue == 0.0


def test_operator_name_reaches_the_row():
    assignment = Assignment(operator_id=1, event_id=10, operator_name="Giulia Rossi")
    calc = PayrollEngine().calculate(_event(), assignment)

    assert calc.operator_name == "Giulia Rossi"
    assert calc.to_dict()["operator_name"] == "Giulia Rossi"
