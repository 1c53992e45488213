from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_iso_date, parse_iso_date
from ..common.time_utils import balance_message, to_time_string
from ..common.validators import require_date, require_month
from ..container import Container
from .report import REPORT_FIELDS


def register(app: Flask, container: Container) -> None:
    def _today():
        # ?today=YYYY-MM-DD lets clients look at a month as of a given day
        value = request.args.get("today")
        return parse_iso_date(require_date(value)) if value else None

    def _write_report_csv(*, data, filename: str):
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=REPORT_FIELDS)
        writer.writeheader()
        for row in data.rows:
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/employees/<employee_id>/balance", methods=["GET"], endpoint="accumulated_balance")
    def accumulated_balance(employee_id: str):
        container.employee_service.get(employee_id)
        minutes = container.balance_service.get_accumulated_balance(employee_id)
        return jsonify(
            {
                "employeeId": employee_id,
                "accumulatedBalanceMinutes": minutes,
                "formatted": to_time_string(minutes),
                "message": balance_message(minutes),
            }
        )

    @app.route("/api/employees/<employee_id>/months/<month>", methods=["GET"], endpoint="month_overview")
    def month_overview(employee_id: str, month: str):
        month = require_month(month)
        report = container.report_service.month_report(employee_id, month, today=_today())
        balances = container.balance_service
        return jsonify(
            {
                "employeeId": employee_id,
                "month": month,
                "balanceMinutes": balances.get_month_balance(employee_id, month),
                "previousMonthBalanceMinutes": balances.get_previous_month_balance(employee_id, month),
                "accumulatedBalanceMinutes": balances.get_accumulated_balance(employee_id),
                "summary": {
                    "totalWorkingDays": report.summary.total_working_days,
                    "filledDays": report.summary.filled_days,
                    "totalWorkedMinutes": report.summary.total_worked_minutes,
                    "totalExpectedMinutes": report.summary.total_expected_minutes,
                },
                "missingDates": [format_iso_date(d) for d in report.missing_dates],
                "implicitAbsenceMinutes": report.implicit_absence_minutes,
            }
        )

    @app.route("/api/employees/<employee_id>/months/<month>/missing", methods=["GET"], endpoint="missing_entries")
    def missing_entries(employee_id: str, month: str):
        report = container.report_service.month_report(employee_id, require_month(month), today=_today())
        return jsonify([format_iso_date(d) for d in report.missing_dates])

    @app.route("/api/employees/<employee_id>/months/<month>/reset", methods=["POST"], endpoint="reset_month")
    def reset_month(employee_id: str, month: str):
        container.employee_service.get(employee_id)
        container.balance_service.reset_month_balance(employee_id, require_month(month))
        return jsonify({"month": month, "balanceMinutes": container.balance_service.get_month_balance(employee_id, month)})

    @app.route("/api/employees/<employee_id>/months/<month>/transfer", methods=["POST"], endpoint="transfer_month")
    def transfer_month(employee_id: str, month: str):
        container.employee_service.get(employee_id)
        container.balance_service.transfer_month_balance(employee_id, require_month(month))
        return jsonify({"month": month, "accumulatedBalanceMinutes": container.balance_service.get_accumulated_balance(employee_id)})

    @app.route("/api/employees/<employee_id>/months/<month>/report.csv", methods=["GET"], endpoint="month_report_csv")
    def month_report_csv(employee_id: str, month: str):
        data = container.report_service.build_month_rows(employee_id, require_month(month), today=_today())
        return _write_report_csv(data=data, filename=f"banco_horas_{employee_id}_{month}.csv")

    @app.route("/api/balances/auto-transfer", methods=["PUT"], endpoint="auto_transfer")
    def auto_transfer():
        data = request.get_json(silent=True) or {}
        state = container.balance_service.set_auto_transfer(bool(data.get("enabled")))
        return jsonify({"enabled": state.enabled, "lastTransferMonth": state.last_transfer_month})
