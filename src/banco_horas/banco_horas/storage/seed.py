"""Demo data loaded into buckets that have never been written."""

from __future__ import annotations

from datetime import date

from ..core.enums import ContractType, IntervalStatus, ScheduleType
from ..employees.model import Employee, Schedule, WorkSchedule
from ..settings.model import SystemSettings
from ..timesheet.calculator.balance_calculator import compute_daily_balance
from ..timesheet.calculator.interval_calculator import compute_worked_minutes
from ..timesheet.model import TimeEntry
from .store import SeedData


def _employees() -> list[Employee]:
    return [
        Employee(
            employee_id="emp001",
            name="João Silva",
            contract_type=ContractType.EFETIVADO,
            schedule=Schedule(ScheduleType.FIVE_BY_TWO),
            work_schedule=WorkSchedule("08:00", "12:00", "13:00", "17:50"),
            expected_minutes_per_day=8 * 60 - 10,
            registration_id="EMP001",
            position="Desenvolvedor",
        ),
        Employee(
            employee_id="emp002",
            name="Maria Oliveira",
            contract_type=ContractType.EFETIVADO,
            schedule=Schedule(ScheduleType.SIX_BY_ONE),
            work_schedule=WorkSchedule("09:00", "12:00", "13:00", "18:00"),
            expected_minutes_per_day=8 * 60,
            registration_id="EMP002",
            position="Designer",
        ),
        Employee(
            employee_id="est001",
            name="Pedro Santos",
            contract_type=ContractType.ESTAGIARIO,
            schedule=Schedule(ScheduleType.FIVE_BY_TWO),
            work_schedule=WorkSchedule("10:00", "13:00", "14:00", "17:00"),
            expected_minutes_per_day=6 * 60,
            registration_id="EST001",
            position="Estagiário de Marketing",
        ),
    ]


def _entry(employee: Employee, settings: SystemSettings, day: date, entry: str, lunch_out: str, lunch_in: str, exit: str) -> TimeEntry:
    interval = compute_worked_minutes(entry, lunch_out, lunch_in, exit)
    balance = compute_daily_balance(
        interval.worked_minutes,
        employee.expected_minutes_per_day,
        settings.tolerance_minutes,
        settings.max_extra_minutes,
    )
    return TimeEntry(
        employee_id=employee.employee_id,
        work_date=day,
        entry=entry,
        lunch_out=lunch_out,
        lunch_in=lunch_in,
        exit=exit,
        worked_minutes=interval.worked_minutes,
        balance_minutes=balance.balance_minutes,
        interval_status=IntervalStatus.OK,
        message="Calculated normally",
    )


def demo_seed() -> SeedData:
    settings = SystemSettings(holidays=("2024-05-01", "2024-09-07", "2024-12-25"))
    joao, maria, _ = employees = _employees()
    entries = [
        _entry(joao, settings, date(2024, 4, 25), "08:05", "12:00", "13:00", "17:55"),
        _entry(joao, settings, date(2024, 4, 26), "08:10", "12:00", "13:00", "17:30"),
        _entry(maria, settings, date(2024, 4, 25), "09:00", "12:00", "13:00", "18:30"),
    ]
    return SeedData(employees=employees, entries=entries, settings=settings)
