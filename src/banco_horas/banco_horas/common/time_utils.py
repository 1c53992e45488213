"""Clock-time parsing and formatting.

Times of day travel through the system as ``HH:MM`` strings and are turned
into minute-of-day integers only when a calculation needs them. Parsing is
lenient: malformed text is never an error here, it simply fails
:func:`is_valid_time` further down the line.
"""

from __future__ import annotations

import re

_TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):([0-5][0-9])$")
_NON_DIGITS = re.compile(r"\D")


def is_valid_time(value: str | None) -> bool:
    if not value:
        return False
    return _TIME_RE.match(value) is not None


def normalize_time(raw: str | None) -> str | None:
    """Coerce loosely typed input ("800", "0830", "1 30") into ``HH:MM``.

    Falls back to inserting a colon after the first two digits, and returns
    the input unchanged when nothing can be salvaged.
    """

    if not raw:
        return raw

    if is_valid_time(raw):
        hours, minutes = raw.split(":")
        return f"{int(hours):02d}:{minutes}"

    digits = _NON_DIGITS.sub("", raw)

    if 1 <= len(digits) <= 2:
        if int(digits) < 24:
            return f"{int(digits):02d}:00"
        return raw

    if len(digits) == 3:
        if int(digits[1:]) < 60:
            return f"0{digits[0]}:{digits[1:]}"

    if len(digits) == 4:
        if int(digits[:2]) < 24 and int(digits[2:]) < 60:
            return f"{digits[:2]}:{digits[2:]}"

    if len(digits) >= 3:
        return f"{digits[:2]}:{digits[2:]}"

    return raw


def to_minutes(value: str | None) -> int:
    if not is_valid_time(value):
        return 0
    hours, minutes = value.split(":")
    return int(hours) * 60 + int(minutes)


def to_time_string(minutes: int) -> str:
    """Render signed minutes as ``[-]HH:MM``; zero is always ``00:00``."""

    if minutes == 0:
        return "00:00"

    sign = "-" if minutes < 0 else ""
    hours, mins = divmod(abs(int(minutes)), 60)
    return f"{sign}{hours:02d}:{mins:02d}"


def _describe(minutes: int) -> str:
    hours, mins = divmod(minutes, 60)
    if hours and mins:
        return f"{hours}h {mins}min"
    if hours:
        return f"{hours}h"
    return f"{mins}min"


def balance_message(balance_minutes: int) -> str:
    """Human readable summary of an accumulated balance."""

    if balance_minutes == 0:
        return "Your hours are balanced."
    if balance_minutes > 0:
        return f"You have {_describe(balance_minutes)} of credit available for compensation."
    return f"You owe {_describe(-balance_minutes)}, which can be repaid with overtime in the coming days."
