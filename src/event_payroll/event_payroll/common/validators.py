from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import ValidationError


def require_number(value, field_name: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a finite number")
    return number


def require_non_negative(value, field_name: str) -> float:
    number = require_number(value, field_name)
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def optional_non_negative(value, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    return require_non_negative(value, field_name)
