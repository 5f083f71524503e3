from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from ..core.enums import WorkerStatus
from .model import Worker


class WorkerRepository(Protocol):
    def save(self, worker: Worker) -> Worker:
        """Insert (id is None) or replace a worker. Returns the stored record."""

        raise NotImplementedError

    def get_by_id(self, worker_id: int) -> Optional[Worker]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Worker]:
        raise NotImplementedError

    def find_by_id_card(self, id_card: str) -> Optional[Worker]:
        raise NotImplementedError

    def find_by_name_containing(self, name: str) -> Sequence[Worker]:
        raise NotImplementedError

    def find_by_position(self, position: str) -> Sequence[Worker]:
        raise NotImplementedError

    def find_by_status(self, status: WorkerStatus) -> Sequence[Worker]:
        raise NotImplementedError

    def delete(self, worker_id: int) -> bool:
        raise NotImplementedError

    def delete_many(self, worker_ids: Iterable[int]) -> int:
        raise NotImplementedError
