from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import SafetyStatus, SeverityLevel
from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import SafetyRecord
from .repository import SafetyRecordRepository


class JsonSafetyRecordRepository(JsonFileRepository[SafetyRecord], SafetyRecordRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, SafetyRecord, store=store)

    def find_by_worker(self, worker_id: int) -> Sequence[SafetyRecord]:
        return self.find(lambda r: r.worker_id == worker_id)

    def find_by_project(self, project_id: int) -> Sequence[SafetyRecord]:
        return self.find(lambda r: r.project_id == project_id)

    def find_by_event_type(self, event_type: str) -> Sequence[SafetyRecord]:
        return self.find(lambda r: r.event_type == event_type)

    def find_by_severity(self, severity: SeverityLevel) -> Sequence[SafetyRecord]:
        return self.find(lambda r: r.severity_level == severity)

    def find_by_status(self, status: SafetyStatus) -> Sequence[SafetyRecord]:
        return self.find(lambda r: r.status == status)

    def find_by_occurrence_between(self, start: datetime, end: datetime) -> Sequence[SafetyRecord]:
        return self.find(lambda r: start <= r.occurrence_time <= end)
