import pytest

from src.banco_horas.banco_horas.core.enums import BalanceAdjustment
from src.banco_horas.banco_horas.timesheet.calculator.balance_calculator import compute_daily_balance


@pytest.mark.parametrize(
    "worked, balance, adjustment",
    [
        (480, 0, BalanceAdjustment.NONE),
        (475, 0, BalanceAdjustment.TOLERANCE),
        (474, -6, BalanceAdjustment.NONE),
        (490, 0, BalanceAdjustment.EXTRA_CAP),
        (491, 11, BalanceAdjustment.NONE),
        (0, -480, BalanceAdjustment.NONE),
    ],
)
def test_dead_zone_boundaries(worked, balance, adjustment):
    result = compute_daily_balance(worked, 480, 5, 10)

    assert result.balance_minutes == balance
    assert result.adjustment == adjustment
    assert result.adjusted == (adjustment != BalanceAdjustment.NONE)


def test_zero_tolerance_passes_every_shortfall_through():
    assert compute_daily_balance(479, 480, 0, 0).balance_minutes == -1
    assert compute_daily_balance(481, 480, 0, 0).balance_minutes == 1
