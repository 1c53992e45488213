from __future__ import annotations

from datetime import date

from ..core.enums import ScheduleType
from .model import Schedule

_SATURDAY = 5
_SUNDAY = 6


def is_working_day(day: date, schedule: Schedule) -> bool:
    """Single dispatch point for "does this employee work on ``day``"."""

    weekday = day.weekday()

    if schedule.schedule_type == ScheduleType.FIVE_BY_TWO:
        return weekday < _SATURDAY
    if schedule.schedule_type == ScheduleType.SIX_BY_ONE:
        return weekday != _SUNDAY
    return weekday in (schedule.work_days or frozenset())
