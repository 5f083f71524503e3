from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WeatherCondition


@dataclass(frozen=True)
class WeatherInfo:
    """Weather observation for one (location, date), cached in weather_infos.json."""

    location: str
    date: date
    weather_condition: WeatherCondition
    temperature: float
    rainfall: float
    wind_speed: float
    weather_alert: Optional[str] = None
    suitable_for_work: bool = True
    work_suggestion: Optional[str] = None
    id: Optional[int] = None


@dataclass(frozen=True)
class WeatherReading:
    """Ad-hoc readings to evaluate without storing anything."""

    temperature: float
    rainfall: float
    wind_speed: float
