from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import TimeEntry


class TimeEntryRepository(Protocol):
    def get_entry(self, employee_id: str, work_date: date) -> Optional[TimeEntry]:
        raise NotImplementedError

    def list_entries(self, *, employee_id: Optional[str] = None, month: Optional[str] = None) -> Sequence[TimeEntry]:
        raise NotImplementedError

    def upsert_time_entry(self, entry: TimeEntry) -> None:
        """Insert or replace by (employee_id, work_date).

        Implementations must rebuild the monthly balances afterwards.
        """

        raise NotImplementedError

    def delete_time_entry(self, employee_id: str, work_date: date) -> bool:
        raise NotImplementedError
