from __future__ import annotations

from abc import ABC, abstractmethod

from ...events.model import Event


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for gross hours)."""

    @abstractmethod
    def gross_hours(self, event: Event) -> float:
        raise NotImplementedError
