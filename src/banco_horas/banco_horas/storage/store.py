from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Callable, Optional, Sequence

from ..balances.aggregator import aggregate_monthly
from ..balances.model import MonthAdjustment, MonthlyBalance, TransferState
from ..employees.model import Employee
from ..settings.model import SystemSettings
from ..timesheet.model import TimeEntry
from . import codec
from .backend import KeyValueBackend

logger = logging.getLogger(__name__)

EMPLOYEES = "employees"
TIME_ENTRIES = "time_entries"
SETTINGS = "settings"
MONTHLY_BALANCES = "monthly_balances"
BALANCE_ADJUSTMENTS = "balance_adjustments"
AUTO_TRANSFER = "auto_transfer"


@dataclass(frozen=True)
class SeedData:
    employees: Sequence[Employee] = ()
    entries: Sequence[TimeEntry] = ()
    settings: SystemSettings = field(default_factory=SystemSettings)


class TimeBankStore:
    """Owner of the persisted collections.

    Hydrates every bucket from the backend at construction (falling back to
    ``seed`` for buckets never written) and flushes a bucket on every call
    that mutates it. Implements the employee, time-entry, settings and
    balance repository protocols.
    """

    def __init__(self, backend: KeyValueBackend, *, seed: Optional[Callable[[], SeedData]] = None):
        self._backend = backend
        seed_data = seed() if seed else SeedData()

        self._employees: dict[str, Employee] = {
            e.employee_id: e
            for e in self._load(EMPLOYEES, codec.employee_from_dict, seed_data.employees, many=True)
        }
        self._entries: dict[tuple[str, date], TimeEntry] = {
            e.key: e for e in self._load(TIME_ENTRIES, codec.entry_from_dict, seed_data.entries, many=True)
        }
        self._settings: SystemSettings = self._load(SETTINGS, codec.settings_from_dict, seed_data.settings)
        self._adjustments: list[MonthAdjustment] = list(
            self._load(BALANCE_ADJUSTMENTS, codec.adjustment_from_dict, (), many=True)
        )
        self._transfer: TransferState = self._load(AUTO_TRANSFER, codec.transfer_state_from_dict, TransferState())

        stored_monthly = self._backend.read(MONTHLY_BALANCES)
        if stored_monthly is None:
            self._monthly = aggregate_monthly(self._entries.values(), self._adjustments)
            self._flush_monthly()
        else:
            self._monthly = [codec.monthly_from_dict(d) for d in stored_monthly]

        logger.info(
            "store hydrated: %d employee(s), %d entr(ies), %d monthly row(s)",
            len(self._employees),
            len(self._entries),
            len(self._monthly),
        )

    def _load(self, bucket: str, decode: Callable[[Any], Any], fallback: Any, *, many: bool = False) -> Any:
        raw = self._backend.read(bucket)
        if raw is None:
            return list(fallback) if many else fallback
        if many:
            return [decode(d) for d in raw]
        return decode(raw)

    # -- flushing ---------------------------------------------------------

    def _flush_employees(self) -> None:
        self._backend.write(EMPLOYEES, [codec.employee_to_dict(e) for e in self._employees.values()])

    def _flush_entries(self) -> None:
        self._backend.write(TIME_ENTRIES, [codec.entry_to_dict(e) for e in self._entries.values()])

    def _flush_monthly(self) -> None:
        self._backend.write(MONTHLY_BALANCES, [codec.monthly_to_dict(m) for m in self._monthly])

    def _rebuild_monthly(self) -> None:
        self._monthly = aggregate_monthly(self._entries.values(), self._adjustments)
        self._flush_monthly()

    # -- employees --------------------------------------------------------

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.values())

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get(employee_id)

    def save_employee(self, employee: Employee) -> None:
        self._employees[employee.employee_id] = employee
        self._flush_employees()

    def delete_employee_cascade(self, employee_id: str) -> bool:
        if employee_id not in self._employees:
            return False

        del self._employees[employee_id]
        self._entries = {k: e for k, e in self._entries.items() if e.employee_id != employee_id}
        self._adjustments = [a for a in self._adjustments if a.employee_id != employee_id]

        self._flush_employees()
        self._flush_entries()
        self._backend.write(BALANCE_ADJUSTMENTS, [codec.adjustment_to_dict(a) for a in self._adjustments])
        self._rebuild_monthly()
        return True

    # -- time entries -----------------------------------------------------

    def get_entry(self, employee_id: str, work_date: date) -> Optional[TimeEntry]:
        return self._entries.get((employee_id, work_date))

    def list_entries(self, *, employee_id: Optional[str] = None, month: Optional[str] = None) -> Sequence[TimeEntry]:
        return [
            e
            for e in self._entries.values()
            if (employee_id is None or e.employee_id == employee_id) and (month is None or e.month == month)
        ]

    def upsert_time_entry(self, entry: TimeEntry) -> None:
        replaced = entry.key in self._entries
        self._entries[entry.key] = entry
        self._flush_entries()
        self._rebuild_monthly()
        logger.info(
            "entry %s/%s %s (balance %d min)",
            entry.employee_id,
            entry.work_date,
            "updated" if replaced else "added",
            entry.balance_minutes,
        )

    def delete_time_entry(self, employee_id: str, work_date: date) -> bool:
        if self._entries.pop((employee_id, work_date), None) is None:
            return False
        self._flush_entries()
        self._rebuild_monthly()
        return True

    # -- settings ---------------------------------------------------------

    def get_settings(self) -> SystemSettings:
        return self._settings

    def save_settings(self, settings: SystemSettings) -> None:
        self._settings = settings
        self._backend.write(SETTINGS, codec.settings_to_dict(settings))

    # -- balances ---------------------------------------------------------

    def list_monthly_balances(self, *, employee_id: Optional[str] = None) -> Sequence[MonthlyBalance]:
        return [m for m in self._monthly if employee_id is None or m.employee_id == employee_id]

    def list_adjustments(self) -> Sequence[MonthAdjustment]:
        return list(self._adjustments)

    def add_adjustment(self, adjustment: MonthAdjustment) -> None:
        self._adjustments.append(adjustment)
        self._backend.write(BALANCE_ADJUSTMENTS, [codec.adjustment_to_dict(a) for a in self._adjustments])
        self._rebuild_monthly()

    def get_transfer_state(self) -> TransferState:
        return self._transfer

    def save_transfer_state(self, state: TransferState) -> None:
        self._transfer = state
        self._backend.write(AUTO_TRANSFER, codec.transfer_state_to_dict(state))
