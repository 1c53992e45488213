from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple


@dataclass(frozen=True)
class MonthlyBalance:
    """Derived cache row: sum of an employee's balances in one month."""

    employee_id: str
    month: str
    total_balance_minutes: int


@dataclass(frozen=True)
class MonthAdjustment:
    """Ledger row written by reset/transfer so a rebuild keeps their effect."""

    employee_id: str
    month: str
    minutes: int
    reason: str


@dataclass(frozen=True)
class TransferState:
    enabled: bool = False
    last_transfer_month: Optional[str] = None


@dataclass(frozen=True)
class MonthSummary:
    total_working_days: int
    filled_days: int
    total_worked_minutes: int
    total_expected_minutes: int


@dataclass(frozen=True)
class MonthReport:
    employee_id: str
    month: str
    missing_dates: Tuple[date, ...]
    summary: MonthSummary
    implicit_absence_minutes: int
