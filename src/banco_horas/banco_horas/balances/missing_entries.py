from __future__ import annotations

from datetime import date
from typing import Iterable

from ..common.datetime_utils import days_of_month
from ..common.validators import require_month
from ..employees.model import Employee
from ..employees.schedule import is_working_day
from ..settings.model import SystemSettings
from ..timesheet.model import TimeEntry
from .model import MonthReport, MonthSummary


def find_missing_entries(
    employee: Employee,
    month: str,
    entries: Iterable[TimeEntry],
    settings: SystemSettings,
    today: date,
) -> MonthReport:
    """Working days of ``month`` up to ``today`` that still lack an entry.

    Holidays and vacation days count as working days in the summary but are
    never reported missing. Every missing day is an implicit full-day debit.
    """

    month = require_month(month)
    by_date = {e.work_date: e for e in entries if e.employee_id == employee.employee_id}

    working_days = 0
    filled_days = 0
    worked_minutes = 0
    expected_minutes = 0
    missing: list[date] = []

    for day in days_of_month(month):
        if day > today:
            break
        if not is_working_day(day, employee.schedule):
            continue

        working_days += 1
        expected_minutes += employee.expected_minutes_per_day

        entry = by_date.get(day)
        if settings.is_holiday(day) or (entry is not None and entry.is_holiday):
            continue
        if settings.is_in_vacation(employee.employee_id, day) or (entry is not None and entry.is_vacation):
            continue

        if entry is not None:
            filled_days += 1
            worked_minutes += entry.worked_minutes
        else:
            missing.append(day)

    summary = MonthSummary(
        total_working_days=working_days,
        filled_days=filled_days,
        total_worked_minutes=worked_minutes,
        total_expected_minutes=expected_minutes,
    )
    return MonthReport(
        employee_id=employee.employee_id,
        month=month,
        missing_dates=tuple(missing),
        summary=summary,
        implicit_absence_minutes=len(missing) * employee.expected_minutes_per_day,
    )
