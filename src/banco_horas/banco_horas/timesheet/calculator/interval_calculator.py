from __future__ import annotations

from typing import Iterable, Sequence

from ...common.time_utils import is_valid_time, to_minutes
from ...core.constants import DEFAULT_TOLERANCE_MINUTES
from ...core.enums import IntervalStatus
from ..model import IntervalResult, WorkBreak
from .base import IntervalCalculator

ABSENCE_MESSAGE = "Absence recorded"


def _span(start: str, end: str) -> str:
    return f"{start}-{end}"


def _break_pairs(lunch_out: str, lunch_in: str, breaks: Iterable[WorkBreak]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    if lunch_out and lunch_in:
        pairs.append((lunch_out, lunch_in))
    for b in breaks:
        if b.exit_time and b.return_time:
            pairs.append((b.exit_time, b.return_time))
    return pairs


class StandardIntervalCalculator(IntervalCalculator):
    """Standard rule: (exit - entry) minus every validated break window."""

    def worked_minutes(
        self,
        entry: str,
        lunch_out: str,
        lunch_in: str,
        exit: str,
        breaks: Sequence[WorkBreak] = (),
    ) -> IntervalResult:
        if not entry or not exit:
            return IntervalResult(0, IntervalStatus.ABSENCE, ABSENCE_MESSAGE)

        pairs = _break_pairs(lunch_out, lunch_in, breaks)

        for value in [entry, exit] + [t for pair in pairs for t in pair]:
            if not is_valid_time(value):
                return IntervalResult(0, IntervalStatus.INVALID_INTERVAL, f"Invalid time: {value!r}")

        entry_min = to_minutes(entry)
        exit_min = to_minutes(exit)
        if exit_min <= entry_min:
            return IntervalResult(0, IntervalStatus.INVALID_INTERVAL, f"Exit {exit} must be after entry {entry}")

        windows = []
        for start, end in pairs:
            start_min, end_min = to_minutes(start), to_minutes(end)
            if end_min <= start_min:
                return IntervalResult(
                    0,
                    IntervalStatus.INVALID_INTERVAL,
                    f"Break {_span(start, end)} must end after it starts",
                )
            if start_min < entry_min or end_min > exit_min:
                return IntervalResult(
                    0,
                    IntervalStatus.INVALID_INTERVAL,
                    f"Break {_span(start, end)} is outside the work span {_span(entry, exit)}",
                )
            windows.append((start_min, end_min, start, end))

        # sorted() is stable, ties keep input order
        windows = sorted(windows, key=lambda w: w[0])
        for current, following in zip(windows, windows[1:]):
            if current[1] > following[0]:
                return IntervalResult(
                    0,
                    IntervalStatus.OVERLAPPING_INTERVALS,
                    f"Breaks {_span(current[2], current[3])} and {_span(following[2], following[3])} overlap",
                )

        worked = (exit_min - entry_min) - sum(end - start for start, end, _, _ in windows)
        return IntervalResult(worked, IntervalStatus.OK, "OK")


def compute_worked_minutes(
    entry: str,
    lunch_out: str,
    lunch_in: str,
    exit: str,
    breaks: Sequence[WorkBreak] = (),
    tolerance_minutes: int = DEFAULT_TOLERANCE_MINUTES,
) -> IntervalResult:
    """Worked minutes of a day.

    ``tolerance_minutes`` is accepted for call-site symmetry with the balance
    calculator; tolerance is applied there, not here.
    """

    return StandardIntervalCalculator().worked_minutes(entry, lunch_out, lunch_in, exit, breaks)
