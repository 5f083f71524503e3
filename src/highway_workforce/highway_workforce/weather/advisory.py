"""Weather rules for outdoor construction work.

Two independent pure functions: a hard go/no-go suitability check, and an
advisory text driven by softer thresholds. The advisory can urge caution while
the day is still suitable; the reverse cannot happen because every hard limit
lies beyond its soft counterpart.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Protocol, TypeVar

from ..core.constants import (
    ADVISORY_COLD_TEMPERATURE_C,
    ADVISORY_HOT_TEMPERATURE_C,
    ADVISORY_RAINFALL_MM,
    ADVISORY_WIND_SPEED_MS,
    MAX_SUITABLE_RAINFALL_MM,
    MAX_SUITABLE_TEMPERATURE_C,
    MAX_SUITABLE_WIND_SPEED_MS,
    MIN_SUITABLE_TEMPERATURE_C,
)

RAIN_GEAR = "Rain expected, prepare rain protection."
HIGH_WIND = "Strong wind, take extra care with work at height."
COLD = "Low temperature, keep workers warm."
HEAT = "High temperature, take heatstroke precautions."
PROCEED = "Weather is suitable for construction, proceed normally."

T = TypeVar("T")


class Reading(Protocol):
    temperature: float
    rainfall: float
    wind_speed: float


def is_suitable_for_work(w: Reading) -> bool:
    return (
        w.rainfall <= MAX_SUITABLE_RAINFALL_MM
        and w.wind_speed <= MAX_SUITABLE_WIND_SPEED_MS
        and MIN_SUITABLE_TEMPERATURE_C <= w.temperature <= MAX_SUITABLE_TEMPERATURE_C
    )


def work_suggestion(w: Reading) -> str:
    phrases = []
    if w.rainfall > ADVISORY_RAINFALL_MM:
        phrases.append(RAIN_GEAR)
    if w.wind_speed > ADVISORY_WIND_SPEED_MS:
        phrases.append(HIGH_WIND)
    if w.temperature < ADVISORY_COLD_TEMPERATURE_C:
        phrases.append(COLD)
    elif w.temperature > ADVISORY_HOT_TEMPERATURE_C:
        phrases.append(HEAT)
    if not phrases:
        return PROCEED
    return " ".join(phrases)


def unsuitability_reasons(w: Reading) -> list[str]:
    reasons = []
    if w.rainfall > MAX_SUITABLE_RAINFALL_MM:
        reasons.append("rainfall too heavy")
    if w.wind_speed > MAX_SUITABLE_WIND_SPEED_MS:
        reasons.append("wind too strong")
    if w.temperature < MIN_SUITABLE_TEMPERATURE_C:
        reasons.append("temperature too low")
    if w.temperature > MAX_SUITABLE_TEMPERATURE_C:
        reasons.append("temperature too high")
    return reasons


def weather_impact(w: Reading) -> str:
    """Impact assessment stored on a schedule."""
    reasons = unsuitability_reasons(w)
    if not reasons:
        return "Suitable for construction"
    return "Unsuitable for construction: " + "; ".join(reasons)


def assess(info: T) -> T:
    """Return a copy of a weather dataclass with suitability and suggestion filled in."""
    return replace(info, suitable_for_work=is_suitable_for_work(info), work_suggestion=work_suggestion(info))
