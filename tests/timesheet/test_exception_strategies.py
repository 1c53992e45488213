from datetime import date

from src.banco_horas.banco_horas.core.enums import DayStatus, ScheduleType
from src.banco_horas.banco_horas.timesheet.factory import DayExceptionStrategyFactory, resolve_exception_balance
from src.banco_horas.banco_horas.timesheet.strategies.holiday_strategy import HolidayStrategy
from src.banco_horas.banco_horas.timesheet.strategies.vacation_strategy import VacationStrategy

WEDNESDAY = date(2024, 5, 1)
SATURDAY = date(2024, 6, 1)
SUNDAY = date(2024, 6, 2)


def test_factory_picks_strategy_per_status():
    factory = DayExceptionStrategyFactory()

    assert factory.for_status(DayStatus.NORMAL) is None
    assert isinstance(factory.for_status(DayStatus.HOLIDAY), HolidayStrategy)
    assert isinstance(factory.for_status(DayStatus.VACATION), VacationStrategy)


def test_holiday_effect_depends_on_weekday():
    assert resolve_exception_balance(WEDNESDAY, DayStatus.HOLIDAY).balance_minutes == -50
    assert resolve_exception_balance(SATURDAY, DayStatus.HOLIDAY).balance_minutes == 240
    assert resolve_exception_balance(SUNDAY, DayStatus.HOLIDAY).balance_minutes == 0


def test_holiday_on_six_by_one_is_nullified():
    result = resolve_exception_balance(SATURDAY, DayStatus.HOLIDAY, ScheduleType.SIX_BY_ONE)

    assert (result.worked_minutes, result.balance_minutes) == (0, 0)


def test_vacation_and_medical_leave_are_neutral():
    for status in (DayStatus.VACATION, DayStatus.MEDICAL_LEAVE):
        result = resolve_exception_balance(WEDNESDAY, status)
        assert (result.worked_minutes, result.balance_minutes) == (0, 0)


def test_normal_day_has_no_exception():
    assert resolve_exception_balance(WEDNESDAY, DayStatus.NORMAL) is None


def test_holiday_on_custom_schedule_is_nullified():
    for day in (WEDNESDAY, SATURDAY, SUNDAY):
        result = resolve_exception_balance(day, DayStatus.HOLIDAY, ScheduleType.CUSTOM)
        assert (result.worked_minutes, result.balance_minutes) == (0, 0)


def test_holiday_on_five_by_two_follows_weekday_rule():
    assert resolve_exception_balance(SATURDAY, DayStatus.HOLIDAY, ScheduleType.FIVE_BY_TWO).balance_minutes == 240
    assert resolve_exception_balance(WEDNESDAY, DayStatus.HOLIDAY, ScheduleType.FIVE_BY_TWO).balance_minutes == -50
