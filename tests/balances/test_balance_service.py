from concurrent.futures import ThreadPoolExecutor
from datetime import date

import pytest

from src.banco_horas.banco_horas.balances.model import TransferState
from tests.conftest import make_employee

MAY_6 = date(2024, 5, 6)
MAY_7 = date(2024, 5, 7)
JUNE_3 = date(2024, 6, 3)


@pytest.fixture
def worked(container):
    ts = container.timesheet_service
    # +60 and -120 in May, +30 in June
    ts.save_entry("emp001", MAY_6, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="18:00")
    ts.save_entry("emp001", MAY_7, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="15:00")
    ts.save_entry("emp001", JUNE_3, entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:30")
    return container


def test_month_previous_and_accumulated(worked):
    balances = worked.balance_service

    assert balances.get_month_balance("emp001", "2024-05") == -60
    assert balances.get_month_balance("emp001", "2024-06") == 30
    assert balances.get_previous_month_balance("emp001", "2024-06") == -60
    assert balances.get_accumulated_balance("emp001") == -30
    assert balances.get_month_balance("emp001", "2023-01") == 0


def test_reset_zeroes_month_and_survives_recompute(worked):
    balances = worked.balance_service
    balances.reset_month_balance("emp001", "2024-05")

    assert balances.get_month_balance("emp001", "2024-05") == 0

    worked.timesheet_service.save_entry(
        "emp001", date(2024, 5, 8), entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:20"
    )
    assert balances.get_month_balance("emp001", "2024-05") == 20


def test_reset_of_zero_month_writes_nothing(container):
    container.balance_service.reset_month_balance("emp001", "2024-05")

    assert container.store.list_adjustments() == []


def test_transfer_moves_balance_to_next_month(worked):
    balances = worked.balance_service
    balances.transfer_month_balance("emp001", "2024-05")

    assert balances.get_month_balance("emp001", "2024-05") == 0
    assert balances.get_month_balance("emp001", "2024-06") == -30
    assert balances.get_accumulated_balance("emp001") == -30


def test_transfer_across_year_end(container):
    container.timesheet_service.save_entry(
        "emp001", date(2024, 12, 2), entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="18:00"
    )
    container.balance_service.transfer_month_balance("emp001", "2024-12")

    assert container.balance_service.get_month_balance("emp001", "2025-01") == 60


def test_transfer_of_zero_month_is_noop(container):
    container.balance_service.transfer_month_balance("emp001", "2024-05")

    assert container.store.list_adjustments() == []


def test_auto_transfer_disabled_does_nothing(worked):
    assert worked.balance_service.run_auto_transfer(date(2024, 6, 14)) == []
    assert worked.balance_service.get_month_balance("emp001", "2024-05") == -60


def test_enabling_mid_month_waits_for_next_boundary(worked):
    balances = worked.balance_service
    state = balances.set_auto_transfer(True, today=date(2024, 6, 14))

    assert state == TransferState(enabled=True, last_transfer_month="2024-06")
    assert balances.run_auto_transfer(date(2024, 6, 14)) == []
    assert balances.get_month_balance("emp001", "2024-05") == -60

    assert balances.run_auto_transfer(date(2024, 7, 1)) == ["emp001"]
    assert balances.get_month_balance("emp001", "2024-06") == 0
    assert balances.get_month_balance("emp001", "2024-07") == 30


def test_auto_transfer_runs_once_per_month(worked):
    balances = worked.balance_service
    worked.store.save_employee(make_employee("emp002"))
    balances.set_auto_transfer(True, today=date(2024, 5, 20))

    assert balances.run_auto_transfer(date(2024, 6, 14)) == ["emp001"]
    assert balances.get_month_balance("emp001", "2024-06") == -30
    assert worked.store.get_transfer_state() == TransferState(enabled=True, last_transfer_month="2024-06")

    assert balances.run_auto_transfer(date(2024, 6, 20)) == []
    assert balances.get_month_balance("emp001", "2024-06") == -30


def test_auto_transfer_fires_again_next_month(worked):
    balances = worked.balance_service
    balances.set_auto_transfer(True, today=date(2024, 5, 20))
    balances.run_auto_transfer(date(2024, 6, 14))

    assert balances.run_auto_transfer(date(2024, 7, 1)) == ["emp001"]
    assert balances.get_month_balance("emp001", "2024-07") == -30
    assert balances.get_month_balance("emp001", "2024-06") == 0


def test_stored_toggle_without_marker_only_records_month(worked):
    worked.store.save_transfer_state(TransferState(enabled=True))

    assert worked.balance_service.run_auto_transfer(date(2024, 6, 14)) == []
    assert worked.store.get_transfer_state().last_transfer_month == "2024-06"
    assert worked.balance_service.get_month_balance("emp001", "2024-05") == -60


def test_concurrent_runs_apply_transfer_once(worked):
    balances = worked.balance_service
    balances.set_auto_transfer(True, today=date(2024, 5, 20))

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: balances.run_auto_transfer(date(2024, 6, 14)), range(8)))

    assert sum(len(moved) for moved in results) == 1
    assert balances.get_month_balance("emp001", "2024-06") == -30
    assert balances.get_month_balance("emp001", "2024-05") == 0
