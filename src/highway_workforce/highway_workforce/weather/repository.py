from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import WeatherInfo


class WeatherInfoRepository(Protocol):
    def save(self, info: WeatherInfo) -> WeatherInfo:
        raise NotImplementedError

    def get_by_id(self, info_id: int) -> Optional[WeatherInfo]:
        raise NotImplementedError

    def find_by_location_and_date(self, location: str, day: date) -> Optional[WeatherInfo]:
        raise NotImplementedError

    def find_by_location_between(self, location: str, start: date, end: date) -> Sequence[WeatherInfo]:
        raise NotImplementedError
