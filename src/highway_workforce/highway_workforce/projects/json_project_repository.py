from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Optional, Sequence

from ..core.enums import ProgressStatus, ProjectStatus
from ..storage.base_repository import JsonFileRepository
from ..storage.json_store import JsonFileStore
from .model import Progress, Project
from .repository import ProgressRepository, ProjectRepository


class JsonProjectRepository(JsonFileRepository[Project], ProjectRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, Project, store=store)

    def find_by_name_containing(self, name: str) -> Sequence[Project]:
        needle = name.lower()
        return self.find(lambda p: needle in (p.name or "").lower())

    def find_by_status(self, status: ProjectStatus) -> Sequence[Project]:
        return self.find(lambda p: p.status == status)


class JsonProgressRepository(JsonFileRepository[Progress], ProgressRepository):
    def __init__(self, path: Path, *, store: Optional[JsonFileStore] = None):
        super().__init__(path, Progress, store=store)

    def find_by_project(self, project_id: int) -> Sequence[Progress]:
        return self.find(lambda p: p.project_id == project_id)

    def find_by_status(self, status: ProgressStatus) -> Sequence[Progress]:
        return self.find(lambda p: p.status == status)

    def find_planned_end_before(self, day: date) -> Sequence[Progress]:
        return self.find(lambda p: p.planned_end_date is not None and p.planned_end_date < day)

    def find_behind_schedule(self) -> Sequence[Progress]:
        return self.find(lambda p: (p.actual_progress or 0) < (p.planned_progress or 0))
