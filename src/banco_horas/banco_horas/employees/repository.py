from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for employees.

    Note (DIP): services depend on this protocol, not on a concrete store.
    """

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def save_employee(self, employee: Employee) -> None:
        raise NotImplementedError

    def delete_employee_cascade(self, employee_id: str) -> bool:
        """Remove the employee together with all of its time entries."""

        raise NotImplementedError
