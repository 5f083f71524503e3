from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import WeatherInfo
from .repository import WeatherInfoRepository


class JsonWeatherInfoRepository(JsonFileRepository[WeatherInfo], WeatherInfoRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, WeatherInfo, store=store)

    def find_by_location_and_date(self, location: str, day: date) -> Optional[WeatherInfo]:
        matches = self.find(lambda w: w.location == location and w.date == day)
        return min(matches, key=lambda w: w.id) if matches else None

    def find_by_location_between(self, location: str, start: date, end: date) -> Sequence[WeatherInfo]:
        rows = self.find(lambda w: w.location == location and start <= w.date <= end)
        return sorted(rows, key=lambda w: w.date)
