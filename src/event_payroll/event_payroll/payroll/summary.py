from __future__ import annotations

import math
from typing import Iterable

from .model import PayrollCalculation, PayrollSummary


def summarize(calculations: Iterable[PayrollCalculation]) -> PayrollSummary:
    """Totals over entries whose attendance counts (present, late, completed).

    Absent and unset entries are left out. Sums are exact per field, so the
    result does not depend on input order.
    """
    counted = [c for c in calculations if c.is_counted]
    if not counted:
        return PayrollSummary()

    return PayrollSummary(
        total_gross_hours=math.fsum(c.gross_hours for c in counted),
        total_net_hours=math.fsum(c.effective_hours for c in counted),
        total_compensation=math.fsum(c.compensation for c in counted),
        total_allowances=math.fsum(c.allowances for c in counted),
        total_revenue=math.fsum(c.total_revenue for c in counted),
        counted_entries=len(counted),
    )
