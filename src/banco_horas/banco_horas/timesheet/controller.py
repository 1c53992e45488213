from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.time_utils import normalize_time
from ..common.validators import require_date, require_month
from ..core.enums import DayStatus, ScheduleType
from ..core.exceptions import ValidationError
from ..container import Container
from ..storage.codec import break_from_dict, entry_to_dict, status_from_flags
from .model import WorkBreak
from .calculator.balance_calculator import compute_daily_balance
from .calculator.interval_calculator import compute_worked_minutes
from .factory import resolve_exception_balance

_FLAG_KEYS = ("isHoliday", "isVacation", "isAtestado")


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data


def _status(data: dict):
    if data.get("status"):
        try:
            return DayStatus(data["status"])
        except ValueError:
            raise ValidationError(f"Unknown day status {data['status']!r}") from None
    if any(k in data for k in _FLAG_KEYS):
        return status_from_flags(data)
    return None


def _time(value) -> str:
    # JSON clients may send 800 instead of "08:00"
    return normalize_time(str(value or "").strip()) or ""


def _punch(data: dict, key: str) -> str:
    return _time(data.get(key))


def _breaks(data: dict) -> tuple:
    raw = data.get("breaks") or ()
    if not isinstance(raw, (list, tuple)) or not all(isinstance(b, dict) for b in raw):
        raise ValidationError("breaks must be a list of objects")
    return tuple(
        WorkBreak(
            break_id=b.break_id,
            exit_time=_time(b.exit_time),
            return_time=_time(b.return_time),
            reason=b.reason,
        )
        for b in (break_from_dict(d) for d in raw)
    )


def _entry_fields(data: dict) -> dict:
    return {
        "entry": _punch(data, "entry"),
        "lunch_out": _punch(data, "lunchOut"),
        "lunch_in": _punch(data, "lunchIn"),
        "exit": _punch(data, "exit"),
        "breaks": _breaks(data),
        "status": _status(data),
        "notes": data.get("notes") or "",
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees/<employee_id>/entries", methods=["GET"], endpoint="list_entries")
    def list_entries(employee_id: str):
        month = request.args.get("month")
        if month:
            require_month(month)
        entries = container.timesheet_service.list_entries(employee_id, month=month)
        return jsonify([entry_to_dict(e) for e in entries])

    @app.route("/api/employees/<employee_id>/entries/<day>", methods=["GET"], endpoint="get_entry")
    def get_entry(employee_id: str, day: str):
        work_date = parse_iso_date(require_date(day))
        return jsonify(entry_to_dict(container.timesheet_service.get_entry(employee_id, work_date)))

    @app.route("/api/employees/<employee_id>/entries/<day>", methods=["PUT"], endpoint="upsert_entry")
    def upsert_entry(employee_id: str, day: str):
        work_date = parse_iso_date(require_date(day))
        saved = container.timesheet_service.save_entry(employee_id, work_date, **_entry_fields(_body()))
        return jsonify(entry_to_dict(saved))

    @app.route("/api/employees/<employee_id>/entries/<day>/preview", methods=["POST"], endpoint="preview_entry")
    def preview_entry(employee_id: str, day: str):
        """Compute a day without saving it (form feedback while typing)."""

        work_date = parse_iso_date(require_date(day))
        employee = container.employee_service.get(employee_id)
        computed = container.timesheet_service.compute_entry(employee, work_date, **_entry_fields(_body()))
        return jsonify(entry_to_dict(computed))

    @app.route("/api/employees/<employee_id>/entries/<day>", methods=["DELETE"], endpoint="delete_entry")
    def delete_entry(employee_id: str, day: str):
        container.timesheet_service.delete_entry(employee_id, parse_iso_date(require_date(day)))
        return "", 204

    @app.route("/api/calc/worked", methods=["POST"], endpoint="calc_worked")
    def calc_worked():
        data = _body()
        result = compute_worked_minutes(
            _punch(data, "entry"),
            _punch(data, "lunchOut"),
            _punch(data, "lunchIn"),
            _punch(data, "exit"),
            _breaks(data),
        )
        return jsonify({"workedMinutes": result.worked_minutes, "status": result.status.value, "message": result.message})

    @app.route("/api/calc/balance", methods=["POST"], endpoint="calc_balance")
    def calc_balance():
        data = _body()
        settings = container.settings_service.get()
        try:
            result = compute_daily_balance(
                int(data["workedMinutes"]),
                int(data["expectedMinutes"]),
                int(data.get("toleranceMinutes", settings.tolerance_minutes)),
                int(data.get("maxExtraMinutes", settings.max_extra_minutes)),
            )
        except (KeyError, TypeError, ValueError):
            raise ValidationError("workedMinutes and expectedMinutes must be integers") from None
        return jsonify(
            {
                "balanceMinutes": result.balance_minutes,
                "adjusted": result.adjusted,
                "adjustment": result.adjustment.value,
            }
        )

    @app.route("/api/calc/exception", methods=["POST"], endpoint="calc_exception")
    def calc_exception():
        data = _body()
        work_date = parse_iso_date(require_date(data.get("date") or ""))
        status = _status(data) or DayStatus.NORMAL
        try:
            schedule_type = ScheduleType.parse(data["scheduleType"]) if data.get("scheduleType") else None
        except ValueError:
            raise ValidationError(f"Unknown schedule type {data['scheduleType']!r}") from None

        result = resolve_exception_balance(work_date, status, schedule_type)
        if result is None:
            return jsonify({"exception": False})
        return jsonify(
            {
                "exception": True,
                "workedMinutes": result.worked_minutes,
                "balanceMinutes": result.balance_minutes,
                "message": result.message,
            }
        )
