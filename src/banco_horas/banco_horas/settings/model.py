from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Tuple

from ..common.datetime_utils import format_iso_date
from ..core.constants import DEFAULT_MAX_EXTRA_MINUTES, DEFAULT_TOLERANCE_MINUTES


@dataclass(frozen=True)
class VacationPeriod:
    employee_id: str
    start_date: date
    end_date: date

    def contains(self, employee_id: str, day: date) -> bool:
        return self.employee_id == employee_id and self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class SystemSettings:
    """System-wide knobs consumed by the calculators.

    ``holidays`` holds ISO dates, kept sorted and unique by SettingsService.
    """

    company_name: str = ""
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES
    max_extra_minutes: int = DEFAULT_MAX_EXTRA_MINUTES
    holidays: Tuple[str, ...] = ()
    vacation_periods: Tuple[VacationPeriod, ...] = field(default_factory=tuple)

    def is_holiday(self, day: date) -> bool:
        return format_iso_date(day) in self.holidays

    def is_in_vacation(self, employee_id: str, day: date) -> bool:
        return any(p.contains(employee_id, day) for p in self.vacation_periods)
