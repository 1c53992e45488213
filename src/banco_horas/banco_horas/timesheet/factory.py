from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayStatus, ScheduleType
from .model import ExceptionResult
from .strategies.base import DayExceptionStrategy
from .strategies.holiday_strategy import HolidayStrategy
from .strategies.medical_leave_strategy import MedicalLeaveStrategy
from .strategies.vacation_strategy import VacationStrategy


@dataclass
class DayExceptionStrategyFactory:
    """Factory Pattern: choose the exception strategy for a day status.

    Returns None for a normal day, which goes through interval math instead.
    """

    def for_status(self, status: DayStatus) -> Optional[DayExceptionStrategy]:
        if status == DayStatus.VACATION:
            return VacationStrategy()
        if status == DayStatus.MEDICAL_LEAVE:
            return MedicalLeaveStrategy()
        if status == DayStatus.HOLIDAY:
            return HolidayStrategy()
        return None


def resolve_exception_balance(
    work_date: date,
    status: DayStatus,
    schedule_type: Optional[ScheduleType] = None,
) -> Optional[ExceptionResult]:
    strategy = DayExceptionStrategyFactory().for_status(status)
    if strategy is None:
        return None
    return strategy.resolve(work_date=work_date, schedule_type=schedule_type)
