from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class JsonAttendanceRepository(JsonFileRepository[AttendanceRecord], AttendanceRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, AttendanceRecord, store=store)

    def find_by_worker(self, worker_id: int) -> Sequence[AttendanceRecord]:
        return self.find(lambda r: r.worker_id == worker_id)

    def find_by_date_between(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        return self.find(lambda r: start <= r.date <= end)

    def find_by_status(self, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        return self.find(lambda r: r.status == status)

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceRecord]:
        matches = self.find(lambda r: r.worker_id == worker_id and r.date == work_date)
        return min(matches, key=lambda r: r.id) if matches else None
