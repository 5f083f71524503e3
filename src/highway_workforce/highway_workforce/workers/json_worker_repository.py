from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import WorkerStatus
from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import Worker
from .repository import WorkerRepository


class JsonWorkerRepository(JsonFileRepository[Worker], WorkerRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, Worker, store=store)

    def find_by_id_card(self, id_card: str) -> Optional[Worker]:
        matches = self.find(lambda w: w.id_card == id_card)
        return matches[0] if matches else None

    def find_by_name_containing(self, name: str) -> Sequence[Worker]:
        needle = name.lower()
        return self.find(lambda w: needle in (w.name or "").lower())

    def find_by_position(self, position: str) -> Sequence[Worker]:
        return self.find(lambda w: w.position == position)

    def find_by_status(self, status: WorkerStatus) -> Sequence[Worker]:
        return self.find(lambda w: w.status == status)
