from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import format_iso_date, today_local
from ..common.time_utils import to_time_string
from ..core.exceptions import NotFoundError
from ..employees.repository import EmployeeRepository
from ..settings.repository import SettingsRepository
from ..timesheet.repository import TimeEntryRepository
from .missing_entries import find_missing_entries
from .model import MonthReport

REPORT_FIELDS = [
    "date",
    "employee_id",
    "name",
    "status",
    "entry",
    "lunch_out",
    "lunch_in",
    "exit",
    "worked",
    "balance",
    "notes",
]


@dataclass(frozen=True)
class ReportData:
    rows: list[dict]
    report: MonthReport


class MonthReportService:
    """Use case: month summary, missing days and the exportable day rows."""

    def __init__(
        self,
        employees: EmployeeRepository,
        entries: TimeEntryRepository,
        settings: SettingsRepository,
    ):
        self._employees = employees
        self._entries = entries
        self._settings = settings

    def month_report(self, employee_id: str, month: str, *, today: Optional[date] = None) -> MonthReport:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        return find_missing_entries(
            employee,
            month,
            self._entries.list_entries(employee_id=employee_id, month=month),
            self._settings.get_settings(),
            today or today_local(),
        )

    def build_month_rows(self, employee_id: str, month: str, *, today: Optional[date] = None) -> ReportData:
        report = self.month_report(employee_id, month, today=today)
        employee = self._employees.get_employee(employee_id)

        rows: list[dict] = []
        for e in sorted(self._entries.list_entries(employee_id=employee_id, month=month), key=lambda x: x.work_date):
            rows.append(
                {
                    "date": format_iso_date(e.work_date),
                    "employee_id": employee_id,
                    "name": employee.name,
                    "status": e.status.value,
                    "entry": e.entry or "-",
                    "lunch_out": e.lunch_out or "-",
                    "lunch_in": e.lunch_in or "-",
                    "exit": e.exit or "-",
                    "worked": to_time_string(e.worked_minutes),
                    "balance": to_time_string(e.balance_minutes),
                    "notes": e.notes,
                }
            )

        for day in report.missing_dates:
            rows.append(
                {
                    "date": format_iso_date(day),
                    "employee_id": employee_id,
                    "name": employee.name,
                    "status": "MISSING",
                    "entry": "-",
                    "lunch_out": "-",
                    "lunch_in": "-",
                    "exit": "-",
                    "worked": to_time_string(0),
                    "balance": to_time_string(-employee.expected_minutes_per_day),
                    "notes": "",
                }
            )

        rows.sort(key=lambda r: r["date"])
        return ReportData(rows=rows, report=report)
