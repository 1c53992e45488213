from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.time_utils import normalize_time, to_time_string
from ..core.enums import BalanceAdjustment, DayStatus, IntervalStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..settings.model import SystemSettings
from ..settings.repository import SettingsRepository
from .calculator.balance_calculator import compute_daily_balance
from .calculator.base import IntervalCalculator
from .calculator.interval_calculator import StandardIntervalCalculator
from .factory import DayExceptionStrategyFactory
from .model import TimeEntry, WorkBreak
from .repository import TimeEntryRepository

logger = logging.getLogger(__name__)

_REJECTED = {IntervalStatus.INVALID_INTERVAL, IntervalStatus.OVERLAPPING_INTERVALS}


def _clean(value: Optional[str]) -> str:
    if not value:
        return ""
    return normalize_time(value.strip()) or ""


def default_status(settings: SystemSettings, employee_id: str, work_date: date) -> DayStatus:
    """Status implied by the global holiday list and vacation periods."""

    if settings.is_in_vacation(employee_id, work_date):
        return DayStatus.VACATION
    if settings.is_holiday(work_date):
        return DayStatus.HOLIDAY
    return DayStatus.NORMAL


class TimesheetService:
    """Use case: turn a day's punches into a persisted TimeEntry."""

    def __init__(
        self,
        entries: TimeEntryRepository,
        employees: EmployeeRepository,
        settings: SettingsRepository,
        *,
        calculator: Optional[IntervalCalculator] = None,
        strategy_factory: Optional[DayExceptionStrategyFactory] = None,
    ):
        self._entries = entries
        self._employees = employees
        self._settings = settings
        self._calculator = calculator or StandardIntervalCalculator()
        self._factory = strategy_factory or DayExceptionStrategyFactory()

    def compute_entry(
        self,
        employee: Employee,
        work_date: date,
        *,
        entry: str = "",
        lunch_out: str = "",
        lunch_in: str = "",
        exit: str = "",
        breaks: Sequence[WorkBreak] = (),
        status: Optional[DayStatus] = None,
        notes: str = "",
    ) -> TimeEntry:
        """Compute worked and balance minutes without persisting anything."""

        settings = self._settings.get_settings()
        status = status or default_status(settings, employee.employee_id, work_date)

        punches = {
            "entry": _clean(entry),
            "lunch_out": _clean(lunch_out),
            "lunch_in": _clean(lunch_in),
            "exit": _clean(exit),
        }
        breaks = tuple(
            WorkBreak(
                break_id=b.break_id,
                exit_time=_clean(b.exit_time),
                return_time=_clean(b.return_time),
                reason=b.reason,
            )
            for b in breaks
        )

        def _entry(worked: int, balance: int, interval_status: IntervalStatus, message: str) -> TimeEntry:
            return TimeEntry(
                employee_id=employee.employee_id,
                work_date=work_date,
                breaks=breaks,
                worked_minutes=worked,
                balance_minutes=balance,
                status=status,
                notes=notes or "",
                interval_status=interval_status,
                message=message,
                **punches,
            )

        strategy = self._factory.for_status(status)
        if strategy is not None:
            result = strategy.resolve(work_date=work_date, schedule_type=employee.schedule_type)
            return _entry(result.worked_minutes, result.balance_minutes, IntervalStatus.OK, result.message)

        interval = self._calculator.worked_minutes(
            punches["entry"], punches["lunch_out"], punches["lunch_in"], punches["exit"], breaks
        )

        if interval.status == IntervalStatus.ABSENCE:
            expected = employee.expected_minutes_per_day
            return _entry(0, -expected, interval.status, f"Absence recorded: {to_time_string(-expected)}")

        if interval.status in _REJECTED:
            return _entry(0, 0, interval.status, interval.message)

        balance = compute_daily_balance(
            interval.worked_minutes,
            employee.expected_minutes_per_day,
            settings.tolerance_minutes,
            settings.max_extra_minutes,
        )
        if balance.adjustment == BalanceAdjustment.TOLERANCE:
            message = f"Late within tolerance ({settings.tolerance_minutes} min): no debit"
        elif balance.adjustment == BalanceAdjustment.EXTRA_CAP:
            message = f"Extra within limit ({settings.max_extra_minutes} min): not banked"
        else:
            message = "Calculated normally"
        return _entry(interval.worked_minutes, balance.balance_minutes, interval.status, message)

    def save_entry(self, employee_id: str, work_date: date, **fields) -> TimeEntry:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        computed = self.compute_entry(employee, work_date, **fields)
        if computed.interval_status in _REJECTED:
            logger.warning("entry %s/%s rejected: %s", employee_id, work_date, computed.message)
            raise ValidationError(computed.message)

        self._entries.upsert_time_entry(computed)
        return computed

    def get_entry(self, employee_id: str, work_date: date) -> TimeEntry:
        found = self._entries.get_entry(employee_id, work_date)
        if found is None:
            raise NotFoundError(f"No entry for {employee_id} on {work_date}")
        return found

    def list_entries(self, employee_id: str, *, month: Optional[str] = None) -> list[TimeEntry]:
        return sorted(self._entries.list_entries(employee_id=employee_id, month=month), key=lambda e: e.work_date)

    def delete_entry(self, employee_id: str, work_date: date) -> None:
        if not self._entries.delete_time_entry(employee_id, work_date):
            raise NotFoundError(f"No entry for {employee_id} on {work_date}")
