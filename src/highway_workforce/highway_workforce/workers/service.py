from __future__ import annotations

import logging
from collections import Counter
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import optional_date
from ..common.pagination import Page, paginate
from ..common.validators import optional_int, optional_text, require_enum, require_non_empty
from ..core.enums import WorkerStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Worker
from .repository import WorkerRepository

log = logging.getLogger(__name__)


class WorkerService:
    """Use case: manage the worker registry."""

    def __init__(self, workers: WorkerRepository):
        self._workers = workers

    def _build(self, data: Mapping[str, Any], *, worker_id: Optional[int] = None) -> Worker:
        age = optional_int(data.get("age"), "Age")
        return Worker(
            id=worker_id,
            name=require_non_empty(data.get("name"), "Name"),
            id_card=require_non_empty(data.get("id_card"), "ID card"),
            gender=optional_text(data.get("gender")),
            age=age,
            phone=optional_text(data.get("phone")),
            position=optional_text(data.get("position")),
            hire_date=optional_date(data.get("hire_date"), "hire date"),
            status=require_enum(data.get("status"), WorkerStatus, "Status", default=WorkerStatus.ACTIVE),
            address=optional_text(data.get("address")),
            remarks=optional_text(data.get("remarks")),
        )

    def _ensure_unique_id_card(self, worker: Worker) -> None:
        existing = self._workers.find_by_id_card(worker.id_card)
        if existing and existing.id != worker.id:
            raise ValidationError(f"A worker with ID card {worker.id_card} already exists")

    def create(self, data: Mapping[str, Any]) -> Worker:
        worker = self._build(data)
        self._ensure_unique_id_card(worker)
        saved = self._workers.save(worker)
        log.info("Created worker %s (%s)", saved.id, saved.name)
        return saved

    def update(self, worker_id: int, data: Mapping[str, Any]) -> Worker:
        self.get(worker_id)
        worker = self._build(data, worker_id=int(worker_id))
        self._ensure_unique_id_card(worker)
        return self._workers.save(worker)

    def save(self, data: Mapping[str, Any], *, worker_id: Optional[int] = None) -> Worker:
        """Create when ``worker_id`` is empty, otherwise update."""
        if worker_id:
            return self.update(worker_id, data)
        return self.create(data)

    def get(self, worker_id: int) -> Worker:
        worker = self._workers.get_by_id(worker_id)
        if not worker:
            raise NotFoundError(f"Worker {worker_id} not found")
        return worker

    def list_all(self) -> list[Worker]:
        return sorted(self._workers.list_all(), key=lambda w: w.id)

    def list_page(
        self,
        *,
        page: int,
        size: int,
        name: Optional[str] = None,
        position: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Page[Worker]:
        workers: Iterable[Worker] = self._workers.find_by_name_containing(name) if name else self._workers.list_all()
        if position:
            workers = [w for w in workers if w.position == position]
        if status:
            wanted = require_enum(status, WorkerStatus, "Status")
            workers = [w for w in workers if w.status == wanted]
        return paginate(workers, page=page, size=size, key=lambda w: w.id)

    def get_by_id_card(self, id_card: str) -> Worker:
        worker = self._workers.find_by_id_card(id_card)
        if not worker:
            raise NotFoundError(f"No worker with ID card {id_card}")
        return worker

    def list_by_position(self, position: str) -> list[Worker]:
        return sorted(self._workers.find_by_position(position), key=lambda w: w.id)

    def list_by_status(self, status: str) -> list[Worker]:
        wanted = require_enum(status, WorkerStatus, "Status")
        return sorted(self._workers.find_by_status(wanted), key=lambda w: w.id)

    def name_map(self) -> dict[int, str]:
        return {w.id: w.name for w in self._workers.list_all()}

    def delete(self, worker_id: int) -> None:
        # Schedules, attendance and safety records keep their worker_id.
        if not self._workers.delete(worker_id):
            raise NotFoundError(f"Worker {worker_id} not found")
        log.info("Deleted worker %s", worker_id)

    def delete_many(self, worker_ids: Iterable[int]) -> int:
        return self._workers.delete_many([int(i) for i in worker_ids])

    def statistics(self) -> dict:
        workers = self._workers.list_all()
        by_position = Counter(w.position for w in workers if w.position)
        by_status = Counter(w.status.value for w in workers)
        return {
            "total_workers": len(workers),
            "by_position": dict(by_position),
            "by_status": dict(by_status),
        }
