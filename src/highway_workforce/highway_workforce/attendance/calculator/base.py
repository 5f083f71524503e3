from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime


class WorkHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for work hours)."""

    @abstractmethod
    def work_hours(self, check_in: datetime, check_out: datetime) -> float:
        raise NotImplementedError

    @abstractmethod
    def overtime_hours(self, work_hours: float) -> float:
        raise NotImplementedError
