from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Optional

from ..common.time_utils import to_minutes
from ..core.enums import ContractType, ScheduleType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class WorkSchedule:
    """Canonical punches of an employee's regular day (``HH:MM`` strings)."""

    entry: str = ""
    lunch_out: str = ""
    lunch_in: str = ""
    exit: str = ""

    def expected_minutes(self) -> int:
        if not self.entry or not self.exit:
            return 0
        total = to_minutes(self.exit) - to_minutes(self.entry)
        if self.lunch_out and self.lunch_in:
            total -= to_minutes(self.lunch_in) - to_minutes(self.lunch_out)
        return max(total, 0)


@dataclass(frozen=True)
class Schedule:
    """Tagged schedule variant; only ``Custom`` carries its working weekdays.

    ``work_days`` uses Python weekday numbers (Monday=0 ... Sunday=6).
    """

    schedule_type: ScheduleType
    work_days: Optional[FrozenSet[int]] = None

    def __post_init__(self) -> None:
        if self.schedule_type == ScheduleType.CUSTOM:
            if self.work_days is None:
                raise ValidationError("Custom schedule requires work days")
            if any(d < 0 or d > 6 for d in self.work_days):
                raise ValidationError("Work days must be weekday numbers 0-6")
        elif self.work_days is not None:
            object.__setattr__(self, "work_days", None)


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee identity plus scheduling contract."""

    employee_id: str
    name: str
    contract_type: ContractType
    schedule: Schedule
    work_schedule: WorkSchedule
    expected_minutes_per_day: int
    registration_id: Optional[str] = None
    position: Optional[str] = None
    department: Optional[str] = None

    def __post_init__(self) -> None:
        if self.expected_minutes_per_day < 0:
            raise ValidationError("Expected minutes per day must not be negative")

    @property
    def schedule_type(self) -> ScheduleType:
        return self.schedule.schedule_type
