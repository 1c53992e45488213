from datetime import date

import pytest

from src.banco_horas.banco_horas.core.enums import ScheduleType
from src.banco_horas.banco_horas.core.exceptions import NotFoundError, ValidationError
from src.banco_horas.banco_horas.employees.model import Schedule
from src.banco_horas.banco_horas.employees.schedule import is_working_day
from src.banco_horas.banco_horas.employees.service import build_work_schedule


def test_expected_minutes_derived_from_work_schedule(container):
    employee = container.employee_service.create_employee(
        name="Ana",
        contract_type="CLT",
        schedule_type="5x2",
        work_schedule=build_work_schedule(entry="9", lunch_out="12", lunch_in="13", exit="1750"),
    )

    assert employee.expected_minutes_per_day == 470
    assert employee.work_schedule.exit == "17:50"


def test_expected_minutes_fall_back_to_schedule_default(container):
    employee = container.employee_service.create_employee(
        name="Bia",
        contract_type="PJ",
        schedule_type="6x1",
        work_schedule=build_work_schedule(),
    )

    assert employee.expected_minutes_per_day == 440


def test_custom_schedule_requires_work_days(container):
    with pytest.raises(ValidationError):
        container.employee_service.create_employee(
            name="Caio",
            contract_type="CLT",
            schedule_type="Personalizado",
            work_schedule=build_work_schedule(),
        )


def test_invalid_inputs_are_rejected(container):
    svc = container.employee_service
    with pytest.raises(ValidationError):
        svc.create_employee(name=" ", contract_type="CLT", schedule_type="5x2", work_schedule=build_work_schedule())
    with pytest.raises(ValidationError):
        svc.create_employee(name="X", contract_type="CLT", schedule_type="4x3", work_schedule=build_work_schedule())
    with pytest.raises(ValidationError):
        build_work_schedule(entry="25:99")


def test_duplicate_id_is_rejected(container):
    with pytest.raises(ValidationError):
        container.employee_service.create_employee(
            name="Dup",
            contract_type="CLT",
            schedule_type="5x2",
            work_schedule=build_work_schedule(),
            employee_id="emp001",
        )


def test_delete_cascades_entries_and_balances(container):
    container.timesheet_service.save_entry("emp001", date(2024, 6, 3))
    container.balance_service.reset_month_balance("emp001", "2024-06")

    container.employee_service.delete_employee("emp001")

    assert container.store.list_entries(employee_id="emp001") == []
    assert container.store.list_adjustments() == []
    assert container.store.list_monthly_balances(employee_id="emp001") == []
    with pytest.raises(NotFoundError):
        container.employee_service.get("emp001")
    with pytest.raises(NotFoundError):
        container.employee_service.delete_employee("emp001")


@pytest.mark.parametrize(
    "schedule, saturday, sunday, monday",
    [
        (Schedule(ScheduleType.FIVE_BY_TWO), False, False, True),
        (Schedule(ScheduleType.SIX_BY_ONE), True, False, True),
        (Schedule(ScheduleType.CUSTOM, frozenset({5, 6})), True, True, False),
    ],
)
def test_is_working_day(schedule, saturday, sunday, monday):
    assert is_working_day(date(2024, 6, 1), schedule) is saturday
    assert is_working_day(date(2024, 6, 2), schedule) is sunday
    assert is_working_day(date(2024, 6, 3), schedule) is monday


def test_non_custom_schedule_drops_work_days():
    assert Schedule(ScheduleType.FIVE_BY_TWO, frozenset({6})).work_days is None
