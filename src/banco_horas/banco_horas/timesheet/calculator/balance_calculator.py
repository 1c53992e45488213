from __future__ import annotations

from ...core.enums import BalanceAdjustment
from ..model import BalanceResult


def compute_daily_balance(
    worked_minutes: int,
    expected_minutes: int,
    tolerance_minutes: int,
    max_extra_minutes: int,
) -> BalanceResult:
    """Signed balance with a dead zone around zero.

    A shortfall up to ``tolerance_minutes`` and a surplus up to
    ``max_extra_minutes`` both collapse to exactly zero.
    """

    difference = int(worked_minutes) - int(expected_minutes)

    if -tolerance_minutes <= difference < 0:
        return BalanceResult(0, BalanceAdjustment.TOLERANCE)

    if 0 < difference <= max_extra_minutes:
        return BalanceResult(0, BalanceAdjustment.EXTRA_CAP)

    return BalanceResult(difference, BalanceAdjustment.NONE)
