from datetime import date

import pytest

from src.banco_horas.banco_horas.common.datetime_utils import days_of_month, month_key, next_month, previous_month
from src.banco_horas.banco_horas.common.validators import require_date, require_month
from src.banco_horas.banco_horas.core.exceptions import ValidationError


def test_month_navigation_wraps_years():
    assert next_month("2024-12") == "2025-01"
    assert previous_month("2024-01") == "2023-12"
    assert next_month("2024-06") == "2024-07"


def test_days_of_month_handles_leap_year():
    days = days_of_month("2024-02")
    assert len(days) == 29
    assert days[0] == date(2024, 2, 1)
    assert days[-1] == date(2024, 2, 29)


def test_month_key():
    assert month_key(date(2024, 6, 3)) == "2024-06"
    assert month_key("2024-06-03") == "2024-06"


@pytest.mark.parametrize("value", ["2024-13", "24-06", "", "2024-06-01"])
def test_require_month_rejects(value):
    with pytest.raises(ValidationError):
        require_month(value)


def test_require_date_rejects_impossible_day():
    with pytest.raises(ValidationError):
        require_date("2024-02-30")


def test_require_month_needs_two_digit_month():
    with pytest.raises(ValidationError):
        require_month("2024-6")
    assert require_month("2024-06") == "2024-06"
