from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .balances.report import MonthReportService
from .balances.service import BalanceService
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .employees.service import EmployeeService
from .settings.service import SettingsService
from .storage.backend import InMemoryBackend, KeyValueBackend
from .storage.json_backend import JsonFileBackend
from .storage.mysql_backend import MySQLBackend
from .storage.seed import demo_seed
from .storage.store import TimeBankStore
from .timesheet.service import TimesheetService

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


@dataclass(frozen=True)
class Container:
    store: TimeBankStore

    employee_service: EmployeeService
    timesheet_service: TimesheetService
    balance_service: BalanceService
    settings_service: SettingsService
    report_service: MonthReportService


def build_backend(settings: Any) -> KeyValueBackend:
    kind = str(getattr(settings, "STORAGE_BACKEND", "json")).lower()

    if kind == "memory":
        return InMemoryBackend()

    if kind == "json":
        return JsonFileBackend(getattr(settings, "STORAGE_DIR", "var/data"))

    if kind == "mysql":
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            apply_schema(conn, schema_path=SCHEMA_PATH)
        return MySQLBackend(conn)

    raise ValueError(f"Unknown STORAGE_BACKEND: {kind!r}")


def build_container(*, backend: KeyValueBackend, seed_on_empty: bool = False) -> Container:
    store = TimeBankStore(backend, seed=demo_seed if seed_on_empty else None)

    return Container(
        store=store,
        employee_service=EmployeeService(store),
        timesheet_service=TimesheetService(store, store, store),
        balance_service=BalanceService(store, store),
        settings_service=SettingsService(store),
        report_service=MonthReportService(store, store, store),
    )
