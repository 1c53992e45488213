from __future__ import annotations

import logging
import threading
from dataclasses import replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import month_key, next_month, previous_month, today_local
from ..common.validators import require_month
from ..employees.repository import EmployeeRepository
from .model import MonthAdjustment, TransferState
from .repository import BalanceRepository

logger = logging.getLogger(__name__)


class BalanceService:
    """Use case: read monthly/accumulated balances, reset and carry them over.

    Resets and transfers are recorded as ledger adjustments, so rebuilding the
    monthly cache from time entries never undoes them.
    """

    def __init__(self, balances: BalanceRepository, employees: EmployeeRepository):
        self._balances = balances
        self._employees = employees
        self._auto_transfer_lock = threading.Lock()

    def get_month_balance(self, employee_id: str, month: str) -> int:
        month = require_month(month)
        for row in self._balances.list_monthly_balances(employee_id=employee_id):
            if row.month == month:
                return row.total_balance_minutes
        return 0

    def get_previous_month_balance(self, employee_id: str, month: str) -> int:
        return self.get_month_balance(employee_id, previous_month(require_month(month)))

    def get_accumulated_balance(self, employee_id: str) -> int:
        return sum(r.total_balance_minutes for r in self._balances.list_monthly_balances(employee_id=employee_id))

    def reset_month_balance(self, employee_id: str, month: str) -> None:
        current = self.get_month_balance(employee_id, month)
        if current == 0:
            return
        self._balances.add_adjustment(
            MonthAdjustment(employee_id=employee_id, month=month, minutes=-current, reason="reset")
        )
        logger.info("balance of %s for %s reset (was %d min)", employee_id, month, current)

    def transfer_month_balance(self, employee_id: str, from_month: str) -> None:
        amount = self.get_month_balance(employee_id, from_month)
        if amount == 0:
            return

        to_month = next_month(from_month)
        self._balances.add_adjustment(
            MonthAdjustment(
                employee_id=employee_id,
                month=to_month,
                minutes=amount,
                reason=f"transfer from {from_month}",
            )
        )
        self.reset_month_balance(employee_id, from_month)
        logger.info("transferred %d min of %s from %s to %s", amount, employee_id, from_month, to_month)

    def set_auto_transfer(self, enabled: bool, *, today: Optional[date] = None) -> TransferState:
        state = replace(self._balances.get_transfer_state(), enabled=bool(enabled))
        if state.enabled and state.last_transfer_month is None:
            # first carry-over happens at the next month boundary, not now
            state = replace(state, last_transfer_month=month_key(today or today_local()))
        self._balances.save_transfer_state(state)
        return state

    def run_auto_transfer(self, today: date) -> list[str]:
        """Carry every employee's previous-month balance into the current month.

        Runs at most once per month boundary; ``last_transfer_month`` is the
        persisted guard against repeated firings. Serialized so concurrent
        requests right after a boundary cannot both apply it.
        """

        with self._auto_transfer_lock:
            return self._run_auto_transfer(today)

    def _run_auto_transfer(self, today: date) -> list[str]:
        state = self._balances.get_transfer_state()
        current = month_key(today)
        if not state.enabled or state.last_transfer_month == current:
            return []

        if state.last_transfer_month is None:
            self._balances.save_transfer_state(replace(state, last_transfer_month=current))
            return []

        source = previous_month(current)
        moved: list[str] = []
        for employee in self._employees.list_employees():
            if self.get_month_balance(employee.employee_id, source) != 0:
                self.transfer_month_balance(employee.employee_id, source)
                moved.append(employee.employee_id)

        self._balances.save_transfer_state(replace(state, last_transfer_month=current))
        logger.info("auto transfer %s -> %s done for %d employee(s)", source, current, len(moved))
        return moved
