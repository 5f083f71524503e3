from __future__ import annotations

import dataclasses
import logging
import threading
from pathlib import Path
from typing import Callable, Dict, Generic, Iterable, List, Optional, Type, TypeVar

from .json_store import JsonFileStore
from .serialization import from_record, to_record

log = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository(Generic[T]):
    """In-memory ``id -> record`` map flushed to a JSON file on every write.

    Records are frozen dataclasses with an ``id`` field that is ``None``
    until the first save. The id counter starts above the largest id found
    on disk and never goes back, so deleted ids are not reused.
    """

    def __init__(self, path: Path, entity_cls: Type[T], *, store: Optional[JsonFileStore] = None):
        self._path = Path(path)
        self._entity_cls = entity_cls
        self._store = store or JsonFileStore()
        self._records: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.RLock()
        self.load()

    @property
    def next_id(self) -> int:
        return self._next_id

    def load(self) -> None:
        try:
            rows = self._store.read_list(self._path)
            records = [from_record(self._entity_cls, row) for row in rows]
        except (OSError, ValueError, TypeError, KeyError) as e:
            log.warning("Failed to load %s, starting with an empty collection: %s", self._path, e)
            records = []

        with self._lock:
            self._records = {int(r.id): r for r in records if r.id is not None}
            self._next_id = max(self._records, default=0) + 1

        if self._records:
            log.info("Loaded %d records from %s", len(self._records), self._path)

    def flush(self) -> bool:
        with self._lock:
            rows = [to_record(r) for r in sorted(self._records.values(), key=lambda r: r.id)]
            try:
                self._store.write_list(self._path, rows)
            except OSError as e:
                log.error("Failed to write %s: %s", self._path, e)
                return False
        return True

    def save(self, entity: T) -> T:
        with self._lock:
            if entity.id is None:
                entity = dataclasses.replace(entity, id=self._next_id)
                self._next_id += 1
            elif entity.id >= self._next_id:
                self._next_id = entity.id + 1
            self._records[entity.id] = entity
            self.flush()
        return entity

    def get_by_id(self, entity_id: int) -> Optional[T]:
        return self._records.get(int(entity_id))

    def list_all(self) -> List[T]:
        return list(self._records.values())

    def find(self, predicate: Callable[[T], bool]) -> List[T]:
        return [r for r in list(self._records.values()) if predicate(r)]

    def count(self) -> int:
        return len(self._records)

    def delete(self, entity_id: int) -> bool:
        with self._lock:
            removed = self._records.pop(int(entity_id), None)
            if removed is None:
                return False
            self.flush()
        return True

    def delete_many(self, entity_ids: Iterable[int]) -> int:
        with self._lock:
            removed = 0
            for entity_id in entity_ids:
                if self._records.pop(int(entity_id), None) is not None:
                    removed += 1
            if removed:
                self.flush()
        return removed
