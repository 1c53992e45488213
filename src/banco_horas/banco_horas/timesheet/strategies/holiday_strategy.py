from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.constants import SATURDAY_HOLIDAY_BALANCE, SUNDAY_HOLIDAY_BALANCE, WEEKDAY_HOLIDAY_BALANCE
from ...core.enums import ScheduleType
from ..model import ExceptionResult
from .base import DayExceptionStrategy

_SATURDAY = 5


class HolidayStrategy(DayExceptionStrategy):
    """Holiday effect depends on the weekday it falls on.

    Only 5x2 schedules (or an unknown schedule) get the weekday rule; every
    other schedule just has the day nullified.
    """

    def resolve(self, *, work_date: date, schedule_type: Optional[ScheduleType] = None) -> ExceptionResult:
        if schedule_type not in (None, ScheduleType.FIVE_BY_TWO):
            return ExceptionResult(0, 0, "Holiday: day nullified (no debit or credit)")

        weekday = work_date.weekday()
        if weekday < _SATURDAY:
            return ExceptionResult(0, WEEKDAY_HOLIDAY_BALANCE, "Weekday holiday: 50-minute debit")
        if weekday == _SATURDAY:
            return ExceptionResult(0, SATURDAY_HOLIDAY_BALANCE, "Saturday holiday: 4-hour credit")
        return ExceptionResult(0, SUNDAY_HOLIDAY_BALANCE, "Sunday holiday: no effect")
