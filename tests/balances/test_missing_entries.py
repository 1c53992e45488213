from datetime import date

from src.banco_horas.banco_horas.balances.missing_entries import find_missing_entries
from src.banco_horas.banco_horas.core.enums import ScheduleType
from src.banco_horas.banco_horas.settings.model import SystemSettings, VacationPeriod
from src.banco_horas.banco_horas.timesheet.model import TimeEntry
from tests.conftest import make_employee

TODAY = date(2024, 6, 14)


def test_missing_days_skip_weekends_holidays_and_vacations():
    employee = make_employee()
    settings = SystemSettings(
        holidays=("2024-06-04",),
        vacation_periods=(VacationPeriod("emp001", date(2024, 6, 5), date(2024, 6, 6)),),
    )
    entries = [TimeEntry("emp001", date(2024, 6, 3), worked_minutes=470)]

    report = find_missing_entries(employee, "2024-06", entries, settings, TODAY)

    assert [d.day for d in report.missing_dates] == [7, 10, 11, 12, 13, 14]
    assert report.summary.total_working_days == 10
    assert report.summary.filled_days == 1
    assert report.summary.total_worked_minutes == 470
    assert report.summary.total_expected_minutes == 4800
    assert report.implicit_absence_minutes == 6 * 480


def test_future_days_are_never_missing():
    report = find_missing_entries(make_employee(), "2024-07", [], SystemSettings(), TODAY)

    assert report.missing_dates == ()
    assert report.summary.total_working_days == 0


def test_schedule_decides_working_days():
    settings = SystemSettings()

    six_by_one = make_employee("a", schedule_type=ScheduleType.SIX_BY_ONE)
    custom = make_employee("b", schedule_type=ScheduleType.CUSTOM, work_days={0, 2})

    assert len(find_missing_entries(six_by_one, "2024-06", [], settings, TODAY).missing_dates) == 12
    assert [d.day for d in find_missing_entries(custom, "2024-06", [], settings, TODAY).missing_dates] == [3, 5, 10, 12]


def test_entries_of_other_employees_are_ignored():
    entries = [TimeEntry("someone-else", date(2024, 6, 3))]

    report = find_missing_entries(make_employee(), "2024-06", entries, SystemSettings(), date(2024, 6, 3))

    assert report.missing_dates == (date(2024, 6, 3),)
