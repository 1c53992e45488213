from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta

from ..core.constants import DATE_FORMAT, MONTH_FORMAT


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, DATE_FORMAT).date()


def format_iso_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def month_key(value: date | str) -> str:
    """``YYYY-MM`` bucket of a date (or of an ISO date string)."""
    if isinstance(value, str):
        return value[:7]
    return value.strftime(MONTH_FORMAT)


def parse_month(value: str) -> tuple[int, int]:
    parsed = datetime.strptime(value, MONTH_FORMAT)
    return parsed.year, parsed.month


def next_month(month: str) -> str:
    year, mon = parse_month(month)
    if mon == 12:
        return f"{year + 1:04d}-01"
    return f"{year:04d}-{mon + 1:02d}"


def previous_month(month: str) -> str:
    year, mon = parse_month(month)
    if mon == 1:
        return f"{year - 1:04d}-12"
    return f"{year:04d}-{mon - 1:02d}"


def days_of_month(month: str) -> list[date]:
    year, mon = parse_month(month)
    first = date(year, mon, 1)
    count = calendar.monthrange(year, mon)[1]
    return [first + timedelta(days=i) for i in range(count)]
