from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import optional_date, today_local
from ..common.validators import optional_float, optional_text, require_enum, require_non_empty
from ..core.enums import WeatherCondition
from ..core.exceptions import NotFoundError, ValidationError
from .advisory import assess, is_suitable_for_work, work_suggestion
from .model import WeatherInfo, WeatherReading
from .repository import WeatherInfoRepository
from .simulator import WeatherSimulator

log = logging.getLogger(__name__)


def reading_from(data: Mapping[str, Any]) -> WeatherReading:
    values = {}
    for name in ("temperature", "rainfall", "wind_speed"):
        value = optional_float(data.get(name), name)
        if value is None:
            raise ValidationError(f"{name} is required")
        values[name] = value
    return WeatherReading(**values)


class WeatherService:
    """Use case: weather lookup with a (location, date) cache.

    A cache miss is filled by the simulator and stored, so later lookups for
    the same key return the same record.
    """

    def __init__(
        self,
        weather: WeatherInfoRepository,
        *,
        simulator: Optional[WeatherSimulator] = None,
        simulation_enabled: bool = True,
    ):
        self._weather = weather
        self._simulator = simulator or WeatherSimulator()
        self._simulation_enabled = bool(simulation_enabled)

    def get_weather_info(self, location: str, day: date) -> WeatherInfo:
        location = require_non_empty(location, "Location")
        cached = self._weather.find_by_location_and_date(location, day)
        if cached:
            return cached

        if not self._simulation_enabled:
            raise NotFoundError(f"No weather data for {location} on {day.isoformat()}")

        info = self._weather.save(self._simulator.simulate(location, day))
        log.info("Simulated weather for %s on %s: %s", location, day, info.weather_condition.value)
        return info

    def update_weather_info(self, location: str) -> WeatherInfo:
        return self.get_weather_info(location, today_local())

    def record_observation(self, data: Mapping[str, Any]) -> WeatherInfo:
        """Store an observed record, replacing any cached one for the same key."""
        location = require_non_empty(data.get("location"), "Location")
        day = optional_date(data.get("date"), "date")
        if day is None:
            raise ValidationError("date is required")

        reading = reading_from(data)
        info = WeatherInfo(
            location=location,
            date=day,
            weather_condition=require_enum(data.get("weather_condition"), WeatherCondition, "Weather condition"),
            temperature=reading.temperature,
            rainfall=reading.rainfall,
            wind_speed=reading.wind_speed,
            weather_alert=optional_text(data.get("weather_alert")),
        )

        existing = self._weather.find_by_location_and_date(location, day)
        if existing:
            info = replace(info, id=existing.id)
        return self._weather.save(assess(info))

    def list_for_location(self, location: str, start: date, end: date) -> list[WeatherInfo]:
        if end < start:
            raise ValidationError("End date must not be before start date")
        return list(self._weather.find_by_location_between(location, start, end))

    def check_suitability(self, data: Mapping[str, Any]) -> bool:
        return is_suitable_for_work(reading_from(data))

    def suggestion(self, data: Mapping[str, Any]) -> str:
        return work_suggestion(reading_from(data))
