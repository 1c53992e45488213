from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .common.datetime_utils import today_local
from .container import Container, build_backend, build_container
from .core.exceptions import DomainError, NotFoundError, ValidationError
from .balances.controller import register as register_balances
from .employees.controller import register as register_employees
from .settings.controller import register as register_settings
from .timesheet.controller import register as register_timesheet

logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(DomainError)
    def _domain(e: DomainError):
        return jsonify({"error": str(e)}), 422

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return e
        logger.exception("unhandled error")
        return jsonify({"error": "Internal server error"}), 500


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        backend = build_backend(settings)
        logger.info(
            "settings=%s backend=%s",
            settings_module,
            getattr(settings, "STORAGE_BACKEND", "json"),
        )
        container = build_container(
            backend=backend,
            seed_on_empty=bool(getattr(settings, "SEED_ON_EMPTY", False)),
        )
    app.extensions["banco_horas"] = container

    # Carry last month's balances over once the calendar has crossed a month.
    container.balance_service.run_auto_transfer(today_local())

    @app.before_request
    def _auto_transfer():
        container.balance_service.run_auto_transfer(today_local())

    @app.cli.command("transfer-balances")
    def transfer_balances():
        """Run the monthly balance carry-over now (when enabled)."""

        moved = container.balance_service.run_auto_transfer(today_local())
        print(f"OK: transferred balances for {len(moved)} employee(s)")

    _register_error_handlers(app)

    register_employees(app, container)
    register_timesheet(app, container)
    register_balances(app, container)
    register_settings(app, container)

    return app
