"""Mapping between domain entities and their JSON documents.

Stored documents keep camelCase keys and the three exception flags
(``isHoliday``/``isVacation``/``isAtestado``) so existing exports load as-is.
Weekday maps use Sunday=0 numbering on disk and Python's Monday=0 in memory.
"""

from __future__ import annotations

from typing import Any

from ..balances.model import MonthAdjustment, MonthlyBalance, TransferState
from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..core.enums import ContractType, DayStatus, IntervalStatus, ScheduleType
from ..core.exceptions import ValidationError
from ..employees.model import Employee, Schedule, WorkSchedule
from ..settings.model import SystemSettings, VacationPeriod
from ..timesheet.model import TimeEntry, WorkBreak


def _to_stored_weekday(py_weekday: int) -> int:
    return (py_weekday + 1) % 7


def _from_stored_weekday(stored: int) -> int:
    return (stored - 1) % 7


def work_days_from_stored(raw: dict[str, Any]) -> frozenset[int]:
    """Python weekdays of a stored ``{"0": bool, ...}`` map (Sunday=0)."""

    return frozenset(_from_stored_weekday(int(k)) for k, on in raw.items() if on)


def employee_to_dict(e: Employee) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": e.employee_id,
        "name": e.name,
        "contractType": e.contract_type.value,
        "scheduleType": e.schedule.schedule_type.value,
        "workSchedule": {
            "entry": e.work_schedule.entry,
            "lunchOut": e.work_schedule.lunch_out,
            "lunchIn": e.work_schedule.lunch_in,
            "exit": e.work_schedule.exit,
        },
        "expectedMinutesPerDay": e.expected_minutes_per_day,
        "registrationId": e.registration_id,
        "position": e.position,
        "department": e.department,
    }
    if e.schedule.work_days is not None:
        data["workDays"] = {str(_to_stored_weekday(d)): (d in e.schedule.work_days) for d in range(7)}
    return data


def employee_from_dict(d: dict[str, Any]) -> Employee:
    schedule_type = ScheduleType.parse(d["scheduleType"])
    work_days = None
    if schedule_type == ScheduleType.CUSTOM and d.get("workDays") is not None:
        work_days = work_days_from_stored(d["workDays"])

    ws = d.get("workSchedule") or {}
    return Employee(
        employee_id=str(d["id"]),
        name=d["name"],
        contract_type=ContractType(d.get("contractType", ContractType.CLT.value)),
        schedule=Schedule(schedule_type=schedule_type, work_days=work_days),
        work_schedule=WorkSchedule(
            entry=ws.get("entry", ""),
            lunch_out=ws.get("lunchOut", ""),
            lunch_in=ws.get("lunchIn", ""),
            exit=ws.get("exit", ""),
        ),
        expected_minutes_per_day=int(d.get("expectedMinutesPerDay", 0)),
        registration_id=d.get("registrationId"),
        position=d.get("position"),
        department=d.get("department"),
    )


def break_to_dict(b: WorkBreak) -> dict[str, Any]:
    return {"id": b.break_id, "exitTime": b.exit_time, "returnTime": b.return_time, "reason": b.reason}


def break_from_dict(d: dict[str, Any]) -> WorkBreak:
    return WorkBreak(
        break_id=str(d.get("id", "")),
        exit_time=str(d.get("exitTime") or ""),
        return_time=str(d.get("returnTime") or ""),
        reason=d.get("reason"),
    )


def status_from_flags(d: dict[str, Any]) -> DayStatus:
    flags = {
        DayStatus.HOLIDAY: bool(d.get("isHoliday")),
        DayStatus.VACATION: bool(d.get("isVacation")),
        DayStatus.MEDICAL_LEAVE: bool(d.get("isAtestado")),
    }
    raised = [status for status, on in flags.items() if on]
    if len(raised) > 1:
        raise ValidationError("At most one of isHoliday, isVacation, isAtestado may be set")
    return raised[0] if raised else DayStatus.NORMAL


def entry_to_dict(e: TimeEntry) -> dict[str, Any]:
    return {
        "date": format_iso_date(e.work_date),
        "employeeId": e.employee_id,
        "entry": e.entry,
        "lunchOut": e.lunch_out,
        "lunchIn": e.lunch_in,
        "exit": e.exit,
        "breaks": [break_to_dict(b) for b in e.breaks],
        "workedMinutes": e.worked_minutes,
        "balanceMinutes": e.balance_minutes,
        "isHoliday": e.is_holiday,
        "isVacation": e.is_vacation,
        "isAtestado": e.is_atestado,
        "notes": e.notes,
        "intervalStatus": e.interval_status.value,
        "message": e.message,
    }


def entry_from_dict(d: dict[str, Any]) -> TimeEntry:
    return TimeEntry(
        employee_id=str(d["employeeId"]),
        work_date=parse_iso_date(d["date"]),
        entry=d.get("entry", ""),
        lunch_out=d.get("lunchOut", ""),
        lunch_in=d.get("lunchIn", ""),
        exit=d.get("exit", ""),
        breaks=tuple(break_from_dict(b) for b in d.get("breaks") or ()),
        worked_minutes=int(d.get("workedMinutes", 0)),
        balance_minutes=int(d.get("balanceMinutes", 0)),
        status=status_from_flags(d),
        notes=d.get("notes") or "",
        interval_status=IntervalStatus(d.get("intervalStatus", IntervalStatus.OK.value)),
        message=d.get("message") or "",
    )


def settings_to_dict(s: SystemSettings) -> dict[str, Any]:
    return {
        "companyName": s.company_name,
        "toleranceMinutes": s.tolerance_minutes,
        "maxExtraMinutes": s.max_extra_minutes,
        "holidays": list(s.holidays),
        "vacationPeriods": [
            {
                "employeeId": p.employee_id,
                "startDate": format_iso_date(p.start_date),
                "endDate": format_iso_date(p.end_date),
            }
            for p in s.vacation_periods
        ],
    }


def settings_from_dict(d: dict[str, Any]) -> SystemSettings:
    defaults = SystemSettings()
    return SystemSettings(
        company_name=d.get("companyName", defaults.company_name),
        tolerance_minutes=int(d.get("toleranceMinutes", defaults.tolerance_minutes)),
        max_extra_minutes=int(d.get("maxExtraMinutes", defaults.max_extra_minutes)),
        holidays=tuple(sorted(set(d.get("holidays") or ()))),
        vacation_periods=tuple(
            VacationPeriod(
                employee_id=str(p["employeeId"]),
                start_date=parse_iso_date(p["startDate"]),
                end_date=parse_iso_date(p["endDate"]),
            )
            for p in d.get("vacationPeriods") or ()
        ),
    )


def monthly_to_dict(m: MonthlyBalance) -> dict[str, Any]:
    return {"month": m.month, "employeeId": m.employee_id, "totalBalanceMinutes": m.total_balance_minutes}


def monthly_from_dict(d: dict[str, Any]) -> MonthlyBalance:
    return MonthlyBalance(
        employee_id=str(d["employeeId"]),
        month=d["month"],
        total_balance_minutes=int(d["totalBalanceMinutes"]),
    )


def adjustment_to_dict(a: MonthAdjustment) -> dict[str, Any]:
    return {"employeeId": a.employee_id, "month": a.month, "minutes": a.minutes, "reason": a.reason}


def adjustment_from_dict(d: dict[str, Any]) -> MonthAdjustment:
    return MonthAdjustment(
        employee_id=str(d["employeeId"]),
        month=d["month"],
        minutes=int(d["minutes"]),
        reason=d.get("reason", ""),
    )


def transfer_state_to_dict(s: TransferState) -> dict[str, Any]:
    return {"enabled": s.enabled, "lastTransferMonth": s.last_transfer_month}


def transfer_state_from_dict(d: Any) -> TransferState:
    # Older stores kept only the boolean toggle.
    if isinstance(d, bool):
        return TransferState(enabled=d)
    return TransferState(enabled=bool(d.get("enabled")), last_transfer_month=d.get("lastTransferMonth"))
