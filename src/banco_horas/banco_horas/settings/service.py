from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.validators import require_date, require_non_empty, require_non_negative
from ..core.exceptions import ValidationError
from .model import SystemSettings, VacationPeriod
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: adjust tolerance bands, holidays and vacation periods."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> SystemSettings:
        return self._settings.get_settings()

    def update(
        self,
        *,
        tolerance_minutes: Optional[int] = None,
        max_extra_minutes: Optional[int] = None,
        company_name: Optional[str] = None,
    ) -> SystemSettings:
        current = self.get()
        updated = replace(
            current,
            tolerance_minutes=(
                current.tolerance_minutes
                if tolerance_minutes is None
                else require_non_negative(tolerance_minutes, "Tolerance minutes")
            ),
            max_extra_minutes=(
                current.max_extra_minutes
                if max_extra_minutes is None
                else require_non_negative(max_extra_minutes, "Max extra minutes")
            ),
            company_name=current.company_name if company_name is None else company_name.strip(),
        )
        self._settings.save_settings(updated)
        return updated

    def add_holiday(self, day: str) -> SystemSettings:
        day = require_date(day)
        current = self.get()
        if day in current.holidays:
            return current
        updated = replace(current, holidays=tuple(sorted(set(current.holidays) | {day})))
        self._settings.save_settings(updated)
        logger.info("holiday %s added", day)
        return updated

    def remove_holiday(self, day: str) -> SystemSettings:
        current = self.get()
        updated = replace(current, holidays=tuple(h for h in current.holidays if h != day))
        self._settings.save_settings(updated)
        return updated

    def add_vacation_period(self, *, employee_id: str, start_date: str, end_date: str) -> SystemSettings:
        employee_id = require_non_empty(employee_id, "Employee")
        start = parse_iso_date(require_date(start_date))
        end = parse_iso_date(require_date(end_date))
        if end < start:
            raise ValidationError("Vacation end date must not precede its start date")

        current = self.get()
        period = VacationPeriod(employee_id=employee_id, start_date=start, end_date=end)
        updated = replace(current, vacation_periods=current.vacation_periods + (period,))
        self._settings.save_settings(updated)
        logger.info("vacation %s..%s registered for %s", format_iso_date(start), format_iso_date(end), employee_id)
        return updated

