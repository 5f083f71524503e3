from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import SafetyStatus, SeverityLevel
from .model import SafetyRecord


class SafetyRecordRepository(Protocol):
    def save(self, record: SafetyRecord) -> SafetyRecord:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[SafetyRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_worker(self, worker_id: int) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_project(self, project_id: int) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_event_type(self, event_type: str) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_severity(self, severity: SeverityLevel) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_status(self, status: SafetyStatus) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def find_by_occurrence_between(self, start: datetime, end: datetime) -> Sequence[SafetyRecord]:
        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, record_ids) -> int:
        raise NotImplementedError
