from __future__ import annotations

import pytest

from src.banco_horas.banco_horas.container import build_container
from src.banco_horas.banco_horas.core.enums import ContractType, ScheduleType
from src.banco_horas.banco_horas.employees.model import Employee, Schedule, WorkSchedule
from src.banco_horas.banco_horas.storage.backend import InMemoryBackend


def make_employee(
    employee_id: str = "emp001",
    *,
    schedule_type: ScheduleType = ScheduleType.FIVE_BY_TWO,
    work_days=None,
    expected: int = 480,
) -> Employee:
    return Employee(
        employee_id=employee_id,
        name=f"Employee {employee_id}",
        contract_type=ContractType.CLT,
        schedule=Schedule(schedule_type, frozenset(work_days) if work_days is not None else None),
        work_schedule=WorkSchedule("08:00", "12:00", "13:00", "17:00"),
        expected_minutes_per_day=expected,
    )


@pytest.fixture
def backend():
    return InMemoryBackend()


@pytest.fixture
def container(backend):
    c = build_container(backend=backend)
    c.store.save_employee(make_employee())
    return c


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    from src.banco_horas.banco_horas.main import create_app

    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()
