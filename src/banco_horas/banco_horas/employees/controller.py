from __future__ import annotations

from flask import Flask, jsonify, request

from ..core.exceptions import ValidationError
from ..container import Container
from ..storage.codec import employee_to_dict, work_days_from_stored
from .service import build_work_schedule

_WEEKDAY_NAMES = {"mon": 0, "tue": 1, "wed": 2, "thu": 3, "fri": 4, "sat": 5, "sun": 6}


def _work_days(raw):
    """Accept ``["mon", "wed"]``, Python weekday numbers, or the stored
    ``{"0": false, "1": true, ...}`` map (Sunday=0) that GET returns.
    """

    if raw is None:
        return None
    if isinstance(raw, dict):
        try:
            keys = {int(k) for k in raw}
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid work days {raw!r}") from None
        if not keys <= set(range(7)):
            raise ValidationError(f"Invalid work days {raw!r}")
        return sorted(work_days_from_stored(raw))
    days = []
    for d in raw:
        if isinstance(d, str) and d.lower()[:3] in _WEEKDAY_NAMES:
            days.append(_WEEKDAY_NAMES[d.lower()[:3]])
        elif isinstance(d, int):
            days.append(d)
        else:
            raise ValidationError(f"Invalid work day {d!r}")
    return days


def register(app: Flask, container: Container) -> None:
    @app.route("/api/employees", methods=["GET"], endpoint="list_employees")
    def list_employees():
        return jsonify([employee_to_dict(e) for e in container.employee_service.list_employees()])

    @app.route("/api/employees/<employee_id>", methods=["GET"], endpoint="get_employee")
    def get_employee(employee_id: str):
        return jsonify(employee_to_dict(container.employee_service.get(employee_id)))

    @app.route("/api/employees", methods=["POST"], endpoint="create_employee")
    def create_employee():
        data = request.get_json(silent=True) or {}
        ws = data.get("workSchedule") or {}

        employee = container.employee_service.create_employee(
            name=data.get("name") or "",
            contract_type=data.get("contractType") or "CLT",
            schedule_type=data.get("scheduleType") or "5x2",
            work_days=_work_days(data.get("workDays")),
            work_schedule=build_work_schedule(
                entry=ws.get("entry") or "",
                lunch_out=ws.get("lunchOut") or "",
                lunch_in=ws.get("lunchIn") or "",
                exit=ws.get("exit") or "",
            ),
            expected_minutes_per_day=data.get("expectedMinutesPerDay"),
            registration_id=data.get("registrationId"),
            position=data.get("position"),
            department=data.get("department"),
            employee_id=data.get("id"),
        )
        return jsonify(employee_to_dict(employee)), 201

    @app.route("/api/employees/<employee_id>", methods=["DELETE"], endpoint="delete_employee")
    def delete_employee(employee_id: str):
        container.employee_service.delete_employee(employee_id)
        return "", 204
