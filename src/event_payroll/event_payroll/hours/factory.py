from __future__ import annotations

from dataclasses import dataclass

from ..events.model import Event
from .calculator.base import HoursCalculator
from .calculator.shift_template_calculator import ShiftTemplateHoursCalculator
from .calculator.span_calculator import SpanHoursCalculator


@dataclass
class HoursCalculatorFactory:
    """Factory Pattern: events with shift templates are counted per template."""

    def for_event(self, event: Event) -> HoursCalculator:
        if event.has_work_shifts:
            return ShiftTemplateHoursCalculator()
        return SpanHoursCalculator()
