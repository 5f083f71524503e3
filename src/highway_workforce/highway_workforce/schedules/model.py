from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional

from ..core.enums import ScheduleStatus, WeatherCondition


@dataclass(frozen=True)
class Schedule:
    """Domain entity: one shift of a worker on a date.

    Weather and conflict fields are derived at write time and cached on the
    record; they are not recomputed when other shifts change.
    """

    worker_id: int
    date: date
    start_time: time
    end_time: time
    project_id: Optional[int] = None
    shift_type: Optional[str] = None
    location: Optional[str] = None
    status: ScheduleStatus = ScheduleStatus.PENDING

    weather_condition: Optional[WeatherCondition] = None
    temperature: Optional[float] = None
    rainfall: Optional[float] = None
    wind_speed: Optional[float] = None
    weather_alert: Optional[str] = None
    suitable_for_work: Optional[bool] = None
    weather_impact: Optional[str] = None

    has_conflict: bool = False
    conflict_description: Optional[str] = None

    remarks: Optional[str] = None
    id: Optional[int] = None
