from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ..core.constants import (
    DEFAULT_HOURLY_RATE_COST,
    DEFAULT_MEAL_ALLOWANCE,
    DEFAULT_MEAL_ALLOWANCE_THRESHOLD_HOURS,
    DEFAULT_SELL_MARGIN,
    DEFAULT_TRAVEL_ALLOWANCE,
)


@dataclass(frozen=True)
class PayrollRates:
    """Fallback business figures used when an assignment leaves a field unset."""

    default_hourly_rate_cost: float = DEFAULT_HOURLY_RATE_COST
    sell_margin: float = DEFAULT_SELL_MARGIN
    meal_allowance_amount: float = DEFAULT_MEAL_ALLOWANCE
    meal_allowance_threshold_hours: float = DEFAULT_MEAL_ALLOWANCE_THRESHOLD_HOURS
    default_travel_allowance: float = DEFAULT_TRAVEL_ALLOWANCE

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "PayrollRates":
        """Build from ``PAYROLL_*`` keys; missing keys keep the defaults."""
        defaults = cls()

        def _get(key: str, fallback: float) -> float:
            value = settings.get(key)
            return fallback if value is None else float(value)

        return cls(
            default_hourly_rate_cost=_get("PAYROLL_DEFAULT_HOURLY_RATE_COST", defaults.default_hourly_rate_cost),
            sell_margin=_get("PAYROLL_SELL_MARGIN", defaults.sell_margin),
            meal_allowance_amount=_get("PAYROLL_MEAL_ALLOWANCE", defaults.meal_allowance_amount),
            meal_allowance_threshold_hours=_get(
                "PAYROLL_MEAL_ALLOWANCE_THRESHOLD_HOURS", defaults.meal_allowance_threshold_hours
            ),
            default_travel_allowance=_get("PAYROLL_DEFAULT_TRAVEL_ALLOWANCE", defaults.default_travel_allowance),
        )
