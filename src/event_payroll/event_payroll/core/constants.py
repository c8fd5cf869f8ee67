"""Constants and defaults.

Note: Keep business figures here to avoid magic numbers spread across code.
"""

DEFAULT_HOURLY_RATE_COST = 15.0
DEFAULT_SELL_MARGIN = 1.667
DEFAULT_MEAL_ALLOWANCE = 10.0
DEFAULT_MEAL_ALLOWANCE_THRESHOLD_HOURS = 5.0
DEFAULT_TRAVEL_ALLOWANCE = 15.0

HOURS_PRECISION = 2
