from __future__ import annotations

from datetime import datetime

from ..core.constants import DATE_FORMAT, MONTH_FORMAT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer") from None
    if number < 0:
        raise ValidationError(f"{field_name} must not be negative")
    return number


def require_month(value: str) -> str:
    try:
        # strptime alone would accept "2024-6"
        if datetime.strptime(value or "", MONTH_FORMAT).strftime(MONTH_FORMAT) != value:
            raise ValueError(value)
    except ValueError:
        raise ValidationError(f"Invalid month {value!r}, expected YYYY-MM") from None
    return value


def require_date(value: str) -> str:
    try:
        if datetime.strptime(value or "", DATE_FORMAT).strftime(DATE_FORMAT) != value:
            raise ValueError(value)
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None
    return value
