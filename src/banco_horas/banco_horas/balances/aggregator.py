from __future__ import annotations

from collections import defaultdict
from typing import Iterable

from ..timesheet.model import TimeEntry
from .model import MonthAdjustment, MonthlyBalance


def aggregate_monthly(
    entries: Iterable[TimeEntry],
    adjustments: Iterable[MonthAdjustment] = (),
) -> list[MonthlyBalance]:
    """Rebuild the whole MonthlyBalance collection from its sources.

    There is no incremental path: callers replace their cache with the result.
    """

    totals: dict[tuple[str, str], int] = defaultdict(int)

    for e in entries:
        totals[(e.employee_id, e.month)] += e.balance_minutes

    for adj in adjustments:
        totals[(adj.employee_id, adj.month)] += adj.minutes

    return [
        MonthlyBalance(employee_id=employee_id, month=month, total_balance_minutes=total)
        for (employee_id, month), total in sorted(totals.items())
    ]
