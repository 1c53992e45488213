from __future__ import annotations

from datetime import date
from typing import Optional

from ...core.enums import ScheduleType
from ..model import ExceptionResult
from .base import DayExceptionStrategy


class MedicalLeaveStrategy(DayExceptionStrategy):
    """Medical leave (atestado): excused, neither debit nor credit."""

    def resolve(self, *, work_date: date, schedule_type: Optional[ScheduleType] = None) -> ExceptionResult:
        return ExceptionResult(0, 0, "Medical leave: day not counted")
