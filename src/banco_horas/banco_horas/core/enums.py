from __future__ import annotations

from enum import Enum


class ScheduleType(str, Enum):
    """Weekly schedule contract of an employee."""

    FIVE_BY_TWO = "5x2"
    SIX_BY_ONE = "6x1"
    CUSTOM = "Custom"

    @classmethod
    def parse(cls, value: str) -> "ScheduleType":
        if value == "Personalizado":
            return cls.CUSTOM
        return cls(value)


class ContractType(str, Enum):
    CLT = "CLT"
    PJ = "PJ"
    EFETIVADO = "Efetivado"
    ESTAGIARIO = "Estagiario"


class DayStatus(str, Enum):
    """Status of a day entry; exception days bypass interval math."""

    NORMAL = "NORMAL"
    HOLIDAY = "HOLIDAY"
    VACATION = "VACATION"
    MEDICAL_LEAVE = "MEDICAL_LEAVE"


class IntervalStatus(str, Enum):
    """Outcome of the work-interval validation."""

    OK = "OK"
    ABSENCE = "ABSENCE"
    INVALID_INTERVAL = "INVALID_INTERVAL"
    OVERLAPPING_INTERVALS = "OVERLAPPING_INTERVALS"


class BalanceAdjustment(str, Enum):
    NONE = "NONE"
    TOLERANCE = "TOLERANCE"
    EXTRA_CAP = "EXTRA_CAP"
