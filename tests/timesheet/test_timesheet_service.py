from datetime import date

import pytest

from src.banco_horas.banco_horas.core.enums import DayStatus, IntervalStatus, ScheduleType
from src.banco_horas.banco_horas.core.exceptions import NotFoundError, ValidationError
from src.banco_horas.banco_horas.timesheet.model import WorkBreak
from tests.conftest import make_employee

MONDAY = date(2024, 6, 3)
SATURDAY = date(2024, 6, 1)


def _service(container):
    return container.timesheet_service


def test_regular_day_is_balanced(container):
    saved = _service(container).save_entry(
        "emp001", MONDAY, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:00"
    )

    assert saved.worked_minutes == 480
    assert saved.balance_minutes == 0
    assert saved.message == "Calculated normally"


def test_loose_time_input_is_normalized(container):
    saved = _service(container).save_entry("emp001", MONDAY, entry="8", lunch_out="12", lunch_in="13", exit="1730")

    assert (saved.entry, saved.exit) == ("08:00", "17:30")
    assert saved.balance_minutes == 30


def test_late_within_tolerance_is_not_debited(container):
    saved = _service(container).save_entry(
        "emp001", MONDAY, entry="08:04", lunch_out="12:00", lunch_in="13:00", exit="17:00"
    )

    assert saved.worked_minutes == 476
    assert saved.balance_minutes == 0
    assert saved.message.startswith("Late within tolerance")


def test_absence_debits_full_expected_day(container):
    saved = _service(container).save_entry("emp001", MONDAY)

    assert saved.interval_status == IntervalStatus.ABSENCE
    assert saved.balance_minutes == -480
    assert saved.message == "Absence recorded: -08:00"


def test_saturday_holiday_credits_four_hours(container):
    saved = _service(container).save_entry("emp001", SATURDAY, status=DayStatus.HOLIDAY)

    assert saved.balance_minutes == 240
    assert saved.is_holiday


def test_vacation_ignores_punches(container):
    saved = _service(container).save_entry(
        "emp001", MONDAY, entry="08:00", exit="20:00", status=DayStatus.VACATION
    )

    assert (saved.worked_minutes, saved.balance_minutes) == (0, 0)
    assert saved.entry == "08:00"


def test_status_defaults_from_settings(container):
    container.settings_service.add_holiday("2024-06-03")
    saved = _service(container).save_entry("emp001", MONDAY)

    assert saved.status == DayStatus.HOLIDAY
    assert saved.balance_minutes == -50


def test_vacation_period_beats_holiday(container):
    container.settings_service.add_holiday("2024-06-03")
    container.settings_service.add_vacation_period(employee_id="emp001", start_date="2024-06-01", end_date="2024-06-10")

    saved = _service(container).save_entry("emp001", MONDAY)

    assert saved.status == DayStatus.VACATION
    assert saved.balance_minutes == 0


def test_six_by_one_holiday_is_nullified(container):
    container.store.save_employee(make_employee("emp002", schedule_type=ScheduleType.SIX_BY_ONE, expected=440))

    saved = _service(container).save_entry("emp002", MONDAY, status=DayStatus.HOLIDAY)

    assert saved.balance_minutes == 0


def test_overlapping_breaks_are_not_persisted(container):
    svc = _service(container)

    with pytest.raises(ValidationError):
        svc.save_entry(
            "emp001",
            MONDAY,
            entry="08:00",
            lunch_out="12:00",
            lunch_in="13:00",
            exit="17:00",
            breaks=(WorkBreak("b1", "12:30", "12:45"),),
        )

    assert svc.list_entries("emp001") == []


def test_preview_reports_rejection_without_raising(container):
    employee = container.employee_service.get("emp001")
    computed = _service(container).compute_entry(employee, MONDAY, entry="17:00", exit="08:00")

    assert computed.interval_status == IntervalStatus.INVALID_INTERVAL
    assert (computed.worked_minutes, computed.balance_minutes) == (0, 0)


def test_save_replaces_existing_day(container):
    svc = _service(container)
    svc.save_entry("emp001", MONDAY, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:00")
    svc.save_entry("emp001", MONDAY, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="18:00")

    entries = svc.list_entries("emp001")
    assert len(entries) == 1
    assert entries[0].balance_minutes == 60
    assert container.balance_service.get_month_balance("emp001", "2024-06") == 60


def test_tolerance_comes_from_current_settings(container):
    container.settings_service.update(tolerance_minutes=0)
    saved = _service(container).save_entry(
        "emp001", MONDAY, entry="08:04", lunch_out="12:00", lunch_in="13:00", exit="17:00"
    )

    assert saved.balance_minutes == -4


def test_unknown_employee(container):
    with pytest.raises(NotFoundError):
        _service(container).save_entry("nobody", MONDAY)


def test_delete_entry(container):
    svc = _service(container)
    svc.save_entry("emp001", MONDAY)
    svc.delete_entry("emp001", MONDAY)

    assert container.balance_service.get_month_balance("emp001", "2024-06") == 0
    with pytest.raises(NotFoundError):
        svc.delete_entry("emp001", MONDAY)


def test_get_entry(container):
    svc = _service(container)
    svc.save_entry("emp001", MONDAY, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:00")

    assert svc.get_entry("emp001", MONDAY).worked_minutes == 480
    with pytest.raises(NotFoundError):
        svc.get_entry("emp001", SATURDAY)
