from __future__ import annotations

import logging
import uuid
from typing import Iterable, Optional

from ..common.time_utils import is_valid_time, normalize_time
from ..common.validators import require_non_empty, require_non_negative
from ..core.constants import DEFAULT_EXPECTED_MINUTES
from ..core.enums import ContractType, ScheduleType
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee, Schedule, WorkSchedule
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def build_work_schedule(*, entry: str = "", lunch_out: str = "", lunch_in: str = "", exit: str = "") -> WorkSchedule:
    values = {}
    for field_name, raw in (("entry", entry), ("lunch_out", lunch_out), ("lunch_in", lunch_in), ("exit", exit)):
        value = normalize_time(raw.strip()) if raw else ""
        if value and not is_valid_time(value):
            raise ValidationError(f"Invalid time for {field_name}: {raw!r}")
        values[field_name] = value
    return WorkSchedule(**values)


def derive_expected_minutes(schedule_type: ScheduleType, work_schedule: WorkSchedule) -> int:
    """Expected minutes come from the canonical day, else the schedule default."""

    minutes = work_schedule.expected_minutes()
    if minutes > 0:
        return minutes
    return DEFAULT_EXPECTED_MINUTES[schedule_type.value]


class EmployeeService:
    """Use case: register and remove employees."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self):
        return list(self._employees.list_employees())

    def get(self, employee_id: str) -> Employee:
        employee = self._employees.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")
        return employee

    def create_employee(
        self,
        *,
        name: str,
        contract_type: ContractType | str,
        schedule_type: ScheduleType | str,
        work_schedule: WorkSchedule,
        work_days: Optional[Iterable[int]] = None,
        expected_minutes_per_day: Optional[int] = None,
        registration_id: Optional[str] = None,
        position: Optional[str] = None,
        department: Optional[str] = None,
        employee_id: Optional[str] = None,
    ) -> Employee:
        name = require_non_empty(name, "Name")
        try:
            contract = ContractType(contract_type)
            schedule_kind = ScheduleType.parse(schedule_type)
        except ValueError as e:
            raise ValidationError(str(e)) from None

        schedule = Schedule(
            schedule_type=schedule_kind,
            work_days=frozenset(int(d) for d in work_days) if work_days is not None else None,
        )

        if expected_minutes_per_day is None:
            expected = derive_expected_minutes(schedule_kind, work_schedule)
        else:
            expected = require_non_negative(expected_minutes_per_day, "Expected minutes")

        employee = Employee(
            employee_id=employee_id or uuid.uuid4().hex[:8],
            name=name,
            contract_type=contract,
            schedule=schedule,
            work_schedule=work_schedule,
            expected_minutes_per_day=expected,
            registration_id=registration_id,
            position=position,
            department=department,
        )
        if self._employees.get_employee(employee.employee_id):
            raise ValidationError(f"Employee {employee.employee_id} already exists")

        self._employees.save_employee(employee)
        logger.info("employee %s created (%s, %d min/day)", employee.employee_id, schedule_kind.value, expected)
        return employee

    def delete_employee(self, employee_id: str) -> None:
        if not self._employees.delete_employee_cascade(employee_id):
            raise NotFoundError(f"Employee {employee_id} not found")
        logger.info("employee %s deleted with all entries", employee_id)
