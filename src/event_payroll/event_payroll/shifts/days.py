from __future__ import annotations

import logging

from ..common.datetime_utils import DateLike, inclusive_day_count, iter_dates
from ..core.enums import DayToken

logger = logging.getLogger(__name__)

_WEEKDAYS = frozenset(range(0, 5))
_WEEKEND = frozenset({5, 6})


def matching_day_count(day_token, interval_start: DateLike, interval_end: DateLike) -> int:
    """Count the calendar days in [start, end] that a day token selects.

    Time of day is ignored on both ends. Unknown tokens match nothing.
    """
    token = DayToken.parse(day_token)
    if token is None:
        logger.debug("Unknown day token %r matches no days", day_token)
        return 0

    if token is DayToken.ALL_DAYS:
        return inclusive_day_count(interval_start, interval_end)

    if token is DayToken.WEEKDAYS:
        wanted = _WEEKDAYS
    elif token is DayToken.WEEKEND:
        wanted = _WEEKEND
    else:
        wanted = frozenset({token.weekday})

    return sum(1 for d in iter_dates(interval_start, interval_end) if d.weekday() in wanted)
