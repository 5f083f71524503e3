from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ProgressStatus, ProjectStatus
from .model import Progress, Project


class ProjectRepository(Protocol):
    def save(self, project: Project) -> Project:
        raise NotImplementedError

    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Project]:
        raise NotImplementedError

    def find_by_name_containing(self, name: str) -> Sequence[Project]:
        raise NotImplementedError

    def find_by_status(self, status: ProjectStatus) -> Sequence[Project]:
        raise NotImplementedError

    def delete(self, project_id: int) -> bool:
        raise NotImplementedError


class ProgressRepository(Protocol):
    def save(self, progress: Progress) -> Progress:
        raise NotImplementedError

    def get_by_id(self, progress_id: int) -> Optional[Progress]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Progress]:
        raise NotImplementedError

    def find_by_project(self, project_id: int) -> Sequence[Progress]:
        raise NotImplementedError

    def find_by_status(self, status: ProgressStatus) -> Sequence[Progress]:
        raise NotImplementedError

    def find_planned_end_before(self, day: date) -> Sequence[Progress]:
        raise NotImplementedError

    def find_behind_schedule(self) -> Sequence[Progress]:
        raise NotImplementedError

    def delete(self, progress_id: int) -> bool:
        raise NotImplementedError
