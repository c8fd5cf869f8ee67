from __future__ import annotations

from typing import Iterable, Optional

from ..assignments.model import Assignment
from ..common.datetime_utils import round2
from ..events.model import Event
from ..hours.factory import HoursCalculatorFactory
from ..hours.service import compute_breakdown, net_hours
from .config import PayrollRates
from .model import PayrollCalculation


class PayrollEngine:
    """Turns an event and one of its assignments into payroll figures.

    Pure: no clock reads and no I/O. Apply the status rules in
    ``events.status`` beforehand if attendance defaults are wanted.
    """

    def __init__(
        self,
        rates: Optional[PayrollRates] = None,
        *,
        hours_factory: Optional[HoursCalculatorFactory] = None,
    ):
        self._rates = rates or PayrollRates()
        self._hours_factory = hours_factory or HoursCalculatorFactory()

    @property
    def rates(self) -> PayrollRates:
        return self._rates

    def calculate(self, event: Event, assignment: Assignment) -> PayrollCalculation:
        rates = self._rates
        breakdown = compute_breakdown(event, self._hours_factory)

        if assignment.gross_hours_override is not None:
            gross = assignment.gross_hours_override
        else:
            gross = breakdown.gross_hours

        if assignment.net_hours_override is not None:
            net = assignment.net_hours_override
        else:
            net = net_hours(gross, breakdown.break_hours_per_day, breakdown.day_count)

        effective = assignment.actual_hours if assignment.actual_hours is not None else net

        cost_rate = assignment.hourly_rate_cost
        if cost_rate is None:
            cost_rate = rates.default_hourly_rate_cost
        sell_rate = assignment.hourly_rate_sell
        if sell_rate is None:
            sell_rate = cost_rate * rates.sell_margin

        if assignment.meal_allowance is not None:
            meal = assignment.meal_allowance
        elif gross > rates.meal_allowance_threshold_hours:
            meal = rates.meal_allowance_amount
        else:
            meal = 0.0

        travel = assignment.travel_allowance
        if travel is None:
            travel = rates.default_travel_allowance

        return PayrollCalculation(
            event_id=event.event_id,
            operator_id=assignment.operator_id,
            operator_name=assignment.operator_name,
            event_title=event.title,
            client=event.client,
            start=event.start,
            end=event.end,
            attendance=assignment.attendance,
            gross_hours=gross,
            net_hours=net,
            actual_hours=assignment.actual_hours,
            effective_hours=effective,
            event_day_count=breakdown.day_count,
            break_hours_per_day=breakdown.break_hours_per_day,
            hourly_rate_cost=cost_rate,
            hourly_rate_sell=sell_rate,
            compensation=round2(effective * cost_rate),
            meal_allowance=float(meal),
            travel_allowance=float(travel),
            total_revenue=round2(effective * sell_rate),
        )

    def calculate_many(self, event: Event, assignments: Iterable[Assignment]) -> list[PayrollCalculation]:
        """Payroll for every operator booked on one event."""
        return [self.calculate(event, a) for a in assignments]
