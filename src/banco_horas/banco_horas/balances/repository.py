from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import MonthAdjustment, MonthlyBalance, TransferState


class BalanceRepository(Protocol):
    def list_monthly_balances(self, *, employee_id: Optional[str] = None) -> Sequence[MonthlyBalance]:
        raise NotImplementedError

    def add_adjustment(self, adjustment: MonthAdjustment) -> None:
        """Append a ledger row and rebuild the monthly balances."""

        raise NotImplementedError

    def get_transfer_state(self) -> TransferState:
        raise NotImplementedError

    def save_transfer_state(self, state: TransferState) -> None:
        raise NotImplementedError
