from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import WeatherCondition
from .advisory import assess
from .model import WeatherInfo


@dataclass(frozen=True)
class ConditionProfile:
    """Uniform ranges (low, high) used to draw readings for one condition."""

    temperature: tuple[float, float]
    rainfall: tuple[float, float]
    wind_speed: tuple[float, float]
    alert: Optional[str] = None


PROFILES: dict[WeatherCondition, ConditionProfile] = {
    WeatherCondition.SUNNY: ConditionProfile((20.0, 30.0), (0.0, 0.0), (0.0, 5.0)),
    WeatherCondition.CLOUDY: ConditionProfile((15.0, 25.0), (0.0, 0.0), (0.0, 8.0)),
    WeatherCondition.OVERCAST: ConditionProfile((10.0, 20.0), (0.0, 2.0), (0.0, 10.0)),
    WeatherCondition.LIGHT_RAIN: ConditionProfile((8.0, 16.0), (2.0, 5.0), (0.0, 12.0)),
    WeatherCondition.MODERATE_RAIN: ConditionProfile((5.0, 10.0), (5.0, 10.0), (0.0, 15.0)),
    WeatherCondition.HEAVY_RAIN: ConditionProfile((0.0, 5.0), (10.0, 20.0), (0.0, 20.0)),
    WeatherCondition.THUNDERSTORM: ConditionProfile(
        (15.0, 25.0), (5.0, 20.0), (0.0, 25.0), alert="Thunderstorm expected, take lightning precautions."
    ),
}


class WeatherSimulator:
    """Synthesizes weather when no real observation exists."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def _draw(self, bounds: tuple[float, float]) -> float:
        low, high = bounds
        return round(low + self._rng.random() * (high - low), 1)

    def simulate(self, location: str, day: date, *, condition: Optional[WeatherCondition] = None) -> WeatherInfo:
        condition = condition or self._rng.choice(list(PROFILES))
        profile = PROFILES[condition]

        info = WeatherInfo(
            location=location,
            date=day,
            weather_condition=condition,
            temperature=self._draw(profile.temperature),
            rainfall=self._draw(profile.rainfall),
            wind_speed=self._draw(profile.wind_speed),
            weather_alert=profile.alert,
        )
        return assess(info)
