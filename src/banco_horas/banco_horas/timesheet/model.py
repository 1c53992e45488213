from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from ..common.datetime_utils import month_key
from ..core.enums import BalanceAdjustment, DayStatus, IntervalStatus


@dataclass(frozen=True)
class WorkBreak:
    """Ad hoc mid-day absence beyond lunch; lives only inside a day entry."""

    break_id: str
    exit_time: str
    return_time: str
    reason: Optional[str] = None


@dataclass(frozen=True)
class TimeEntry:
    """Domain entity: the single record of one employee on one day.

    ``(employee_id, work_date)`` is the natural key. ``worked_minutes`` and
    ``balance_minutes`` are derived by :class:`TimesheetService`.
    """

    employee_id: str
    work_date: date
    entry: str = ""
    lunch_out: str = ""
    lunch_in: str = ""
    exit: str = ""
    breaks: Tuple[WorkBreak, ...] = ()
    worked_minutes: int = 0
    balance_minutes: int = 0
    status: DayStatus = DayStatus.NORMAL
    notes: str = ""
    interval_status: IntervalStatus = IntervalStatus.OK
    message: str = ""

    @property
    def key(self) -> tuple[str, date]:
        return (self.employee_id, self.work_date)

    @property
    def month(self) -> str:
        return month_key(self.work_date)

    @property
    def is_holiday(self) -> bool:
        return self.status == DayStatus.HOLIDAY

    @property
    def is_vacation(self) -> bool:
        return self.status == DayStatus.VACATION

    @property
    def is_atestado(self) -> bool:
        return self.status == DayStatus.MEDICAL_LEAVE


@dataclass(frozen=True)
class IntervalResult:
    worked_minutes: int
    status: IntervalStatus
    message: str = ""


@dataclass(frozen=True)
class BalanceResult:
    balance_minutes: int
    adjustment: BalanceAdjustment = BalanceAdjustment.NONE

    @property
    def adjusted(self) -> bool:
        return self.adjustment != BalanceAdjustment.NONE


@dataclass(frozen=True)
class ExceptionResult:
    """Fixed effect of an exception day, bypassing interval math."""

    worked_minutes: int
    balance_minutes: int
    message: str
