from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Protocol, Sequence

from .model import Schedule


class ScheduleRepository(Protocol):
    def save(self, schedule: Schedule) -> Schedule:
        raise NotImplementedError

    def get_by_id(self, schedule_id: int) -> Optional[Schedule]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Schedule]:
        raise NotImplementedError

    def find_by_worker(self, worker_id: int, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Schedule]:
        """Schedules of one worker, optionally limited to ``start..end`` (inclusive)."""

        raise NotImplementedError

    def find_by_project(self, project_id: int, *, start: Optional[date] = None, end: Optional[date] = None) -> Sequence[Schedule]:
        raise NotImplementedError

    def find_by_date_and_location(self, day: date, location: str) -> Sequence[Schedule]:
        raise NotImplementedError

    def delete(self, schedule_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, schedule_ids: Iterable[int]) -> int:
        raise NotImplementedError
