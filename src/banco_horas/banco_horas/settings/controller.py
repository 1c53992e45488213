from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..storage.codec import settings_to_dict


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        return jsonify(settings_to_dict(container.settings_service.get()))

    @app.route("/api/settings", methods=["PATCH"], endpoint="update_settings")
    def update_settings():
        data = request.get_json(silent=True) or {}
        updated = container.settings_service.update(
            tolerance_minutes=data.get("toleranceMinutes"),
            max_extra_minutes=data.get("maxExtraMinutes"),
            company_name=data.get("companyName"),
        )
        return jsonify(settings_to_dict(updated))

    @app.route("/api/settings/holidays", methods=["POST"], endpoint="add_holiday")
    def add_holiday():
        data = request.get_json(silent=True) or {}
        return jsonify(settings_to_dict(container.settings_service.add_holiday(data.get("date") or "")))

    @app.route("/api/settings/holidays/<day>", methods=["DELETE"], endpoint="remove_holiday")
    def remove_holiday(day: str):
        return jsonify(settings_to_dict(container.settings_service.remove_holiday(day)))

    @app.route("/api/settings/vacations", methods=["POST"], endpoint="add_vacation")
    def add_vacation():
        data = request.get_json(silent=True) or {}
        updated = container.settings_service.add_vacation_period(
            employee_id=data.get("employeeId") or "",
            start_date=data.get("startDate") or "",
            end_date=data.get("endDate") or "",
        )
        return jsonify(settings_to_dict(updated)), 201
