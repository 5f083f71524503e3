from __future__ import annotations

from datetime import datetime

from ...common.datetime_utils import hours_between
from ...core.constants import DEFAULT_STANDARD_WORK_HOURS
from .base import WorkHoursCalculator


class StandardWorkHoursCalculator(WorkHoursCalculator):
    """Standard rule: (out - in) in hours, one decimal; overtime beyond the standard day."""

    def __init__(self, standard_hours: float = DEFAULT_STANDARD_WORK_HOURS):
        self._standard_hours = float(standard_hours)

    def work_hours(self, check_in: datetime, check_out: datetime) -> float:
        return max(hours_between(check_in, check_out), 0.0)

    def overtime_hours(self, work_hours: float) -> float:
        return round(max(work_hours - self._standard_hours, 0.0), 1)
