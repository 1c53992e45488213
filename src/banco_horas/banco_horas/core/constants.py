"""Constants and defaults.

Note: Keep business constants here to avoid magic numbers spread across code.
"""

DEFAULT_TOLERANCE_MINUTES = 5
DEFAULT_MAX_EXTRA_MINUTES = 10

WEEKDAY_HOLIDAY_BALANCE = -50
SATURDAY_HOLIDAY_BALANCE = 4 * 60
SUNDAY_HOLIDAY_BALANCE = 0

DEFAULT_EXPECTED_MINUTES = {
    "5x2": 8 * 60,
    "6x1": 7 * 60 + 20,
    "Custom": 8 * 60,
}

MONTH_FORMAT = "%Y-%m"
DATE_FORMAT = "%Y-%m-%d"
