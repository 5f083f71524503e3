from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import Schedule
from .repository import ScheduleRepository


def _in_range(day: date, start: Optional[date], end: Optional[date]) -> bool:
    if start is not None and day < start:
        return False
    if end is not None and day > end:
        return False
    return True


def _ordered(rows) -> list[Schedule]:
    return sorted(rows, key=lambda s: (s.date, s.start_time, s.id))


class JsonScheduleRepository(JsonFileRepository[Schedule], ScheduleRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, Schedule, store=store)

    def find_by_worker(self, worker_id: int, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Schedule]:
        return _ordered(self.find(lambda s: s.worker_id == worker_id and _in_range(s.date, start, end)))

    def find_by_project(self, project_id: int, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Schedule]:
        return _ordered(self.find(lambda s: s.project_id == project_id and _in_range(s.date, start, end)))

    def find_by_date_and_location(self, day: date, location: str) -> Sequence[Schedule]:
        return _ordered(self.find(lambda s: s.date == day and s.location == location))
