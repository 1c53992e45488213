from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from ..model import IntervalResult, WorkBreak


class IntervalCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(
        self,
        entry: str,
        lunch_out: str,
        lunch_in: str,
        exit: str,
        breaks: Sequence[WorkBreak] = (),
    ) -> IntervalResult:
        raise NotImplementedError
