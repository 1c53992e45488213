from datetime import date

from tests.conftest import make_employee


def test_month_rows_merge_entries_and_missing_days(container):
    container.timesheet_service.save_entry(
        "emp001", date(2024, 6, 4), entry="08:00", lunch_out="12:00", lunch_in="13:00", exit="17:30"
    )

    data = container.report_service.build_month_rows("emp001", "2024-06", today=date(2024, 6, 5))

    assert [(r["date"], r["status"]) for r in data.rows] == [
        ("2024-06-03", "MISSING"),
        ("2024-06-04", "NORMAL"),
        ("2024-06-05", "MISSING"),
    ]
    assert data.rows[1]["worked"] == "08:30"
    assert data.rows[1]["balance"] == "00:30"
    assert data.rows[0]["balance"] == "-08:00"
    assert data.report.implicit_absence_minutes == 960


def test_month_report_uses_employee_expected_minutes(container):
    container.store.save_employee(make_employee("est001", expected=360))

    report = container.report_service.month_report("est001", "2024-06", today=date(2024, 6, 3))

    assert report.implicit_absence_minutes == 360
