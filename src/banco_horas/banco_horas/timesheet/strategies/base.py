from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from ...core.enums import ScheduleType
from ..model import ExceptionResult


class DayExceptionStrategy(ABC):
    """Strategy Pattern: encapsulate the fixed balance effect of an exception day."""

    @abstractmethod
    def resolve(self, *, work_date: date, schedule_type: Optional[ScheduleType] = None) -> ExceptionResult:
        raise NotImplementedError
