from __future__ import annotations

import logging
from collections import Counter
from datetime import date, datetime, time
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..common.datetime_utils import optional_datetime
from ..common.pagination import Page, paginate
from ..common.validators import optional_int, optional_text, require_enum, require_non_empty
from ..core.enums import SafetyStatus, SeverityLevel
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..workers.repository import WorkerRepository
from .model import SafetyRecord
from .repository import SafetyRecordRepository

log = logging.getLogger(__name__)


def _newest_first(rows: Iterable[SafetyRecord]) -> list[SafetyRecord]:
    return sorted(rows, key=lambda r: (r.occurrence_time, r.id), reverse=True)


class SafetyRecordService:
    def __init__(self, records: SafetyRecordRepository, workers: WorkerRepository, projects: ProjectRepository):
        self._records = records
        self._workers = workers
        self._projects = projects

    def _build(self, data: Mapping[str, Any], *, record_id: Optional[int] = None) -> SafetyRecord:
        occurred = optional_datetime(data.get("occurrence_time"), "occurrence time")
        if occurred is None:
            raise ValidationError("Occurrence time is required")

        worker_id = optional_int(data.get("worker_id"), "Worker")
        worker_name = optional_text(data.get("worker_name"))
        if worker_id:
            worker = self._workers.get_by_id(worker_id)
            if not worker:
                raise ValidationError(f"Worker {worker_id} does not exist")
            worker_name = worker.name

        project_id = optional_int(data.get("project_id"), "Project")
        project_name = optional_text(data.get("project_name"))
        if project_id:
            project = self._projects.get_by_id(project_id)
            if not project:
                raise ValidationError(f"Project {project_id} does not exist")
            project_name = project.name

        return SafetyRecord(
            id=record_id,
            event_type=require_non_empty(data.get("event_type"), "Event type"),
            occurrence_time=occurred,
            worker_id=worker_id or None,
            worker_name=worker_name,
            project_id=project_id or None,
            project_name=project_name,
            severity_level=require_enum(
                data.get("severity_level"), SeverityLevel, "Severity level", default=SeverityLevel.LOW
            ),
            location=optional_text(data.get("location")),
            description=optional_text(data.get("description")),
            status=require_enum(data.get("status"), SafetyStatus, "Status", default=SafetyStatus.OPEN),
            measures=optional_text(data.get("measures")),
            handler=optional_text(data.get("handler")),
            remarks=optional_text(data.get("remarks")),
        )

    def create(self, data: Mapping[str, Any]) -> SafetyRecord:
        record = self._records.save(self._build(data))
        log.info("Logged safety record %s (%s, %s)", record.id, record.event_type, record.severity_level.value)
        return record

    def update(self, record_id: int, data: Mapping[str, Any]) -> SafetyRecord:
        self.get(record_id)
        return self._records.save(self._build(data, record_id=int(record_id)))

    def save(self, data: Mapping[str, Any], *, record_id: Optional[int] = None) -> SafetyRecord:
        if record_id:
            return self.update(record_id, data)
        return self.create(data)

    def get(self, record_id: int) -> SafetyRecord:
        record = self._records.get_by_id(record_id)
        if not record:
            raise NotFoundError(f"Safety record {record_id} not found")
        return record

    def list_page(self, *, page: int, size: int) -> Page[SafetyRecord]:
        return paginate(self._records.list_all(), page=page, size=size, key=lambda r: (r.occurrence_time, r.id), reverse=True)

    def list_by_worker(self, worker_id: int) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_worker(worker_id))

    def list_by_project(self, project_id: int) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_project(project_id))

    def list_by_event_type(self, event_type: str) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_event_type(event_type))

    def list_by_severity(self, severity: str) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_severity(require_enum(severity, SeverityLevel, "Severity level")))

    def list_by_status(self, status: str) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_status(require_enum(status, SafetyStatus, "Status")))

    def list_between(self, start: datetime, end: datetime) -> Sequence[SafetyRecord]:
        return _newest_first(self._records.find_by_occurrence_between(start, end))

    def search(
        self,
        *,
        worker_id: Optional[int] = None,
        project_id: Optional[int] = None,
        event_type: Optional[str] = None,
        severity_level: Optional[str] = None,
        status: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[SafetyRecord]:
        """All given criteria must match; dates bound the occurrence day inclusively."""
        severity = require_enum(severity_level, SeverityLevel, "Severity level") if severity_level else None
        wanted_status = require_enum(status, SafetyStatus, "Status") if status else None
        lower = datetime.combine(start, time.min) if start else None
        upper = datetime.combine(end, time.max) if end else None

        def matches(r: SafetyRecord) -> bool:
            if worker_id and r.worker_id != worker_id:
                return False
            if project_id and r.project_id != project_id:
                return False
            if event_type and r.event_type != event_type:
                return False
            if severity and r.severity_level != severity:
                return False
            if wanted_status and r.status != wanted_status:
                return False
            if lower and r.occurrence_time < lower:
                return False
            if upper and r.occurrence_time > upper:
                return False
            return True

        return _newest_first(r for r in self._records.list_all() if matches(r))

    def delete(self, record_id: int) -> None:
        if not self._records.delete(record_id):
            raise NotFoundError(f"Safety record {record_id} not found")

    def delete_many(self, record_ids: Iterable[int]) -> int:
        return self._records.delete_many(record_ids)

    def statistics(self) -> dict:
        rows = self._records.list_all()
        by_severity = Counter(r.severity_level for r in rows)
        by_status = Counter(r.status for r in rows)
        return {
            "total_records": len(rows),
            "by_severity": {s.value: by_severity.get(s, 0) for s in SeverityLevel},
            "by_status": {s.value: by_status.get(s, 0) for s in SafetyStatus},
            "by_event_type": dict(Counter(r.event_type for r in rows)),
        }
