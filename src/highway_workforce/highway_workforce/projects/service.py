from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local, optional_date, today_local
from ..common.pagination import Page, paginate
from ..common.validators import (
    optional_float,
    optional_text,
    require_enum,
    require_non_empty,
    require_percent,
    require_positive_id,
)
from ..core.enums import ProgressStatus, ProjectStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Progress, Project
from .repository import ProgressRepository, ProjectRepository

log = logging.getLogger(__name__)


class ProjectService:
    def __init__(self, projects: ProjectRepository):
        self._projects = projects

    def _build(self, data: Mapping[str, Any], *, project_id: Optional[int] = None) -> Project:
        start = optional_date(data.get("start_date"), "start date")
        end = optional_date(data.get("end_date"), "end date")
        if start and end and end < start:
            raise ValidationError("End date must not be before start date")
        budget = optional_float(data.get("budget"), "Budget")
        if budget is not None and budget < 0:
            raise ValidationError("Budget must not be negative")

        return Project(
            id=project_id,
            name=require_non_empty(data.get("name"), "Project name"),
            description=optional_text(data.get("description")),
            location=optional_text(data.get("location")),
            start_date=start,
            end_date=end,
            status=require_enum(data.get("status"), ProjectStatus, "Status", default=ProjectStatus.PLANNING),
            manager=optional_text(data.get("manager")),
            budget=budget,
            progress=require_percent(data.get("progress"), "Progress"),
        )

    def create(self, data: Mapping[str, Any]) -> Project:
        project = self._projects.save(self._build(data))
        log.info("Created project %s (%s)", project.id, project.name)
        return project

    def update(self, project_id: int, data: Mapping[str, Any]) -> Project:
        self.get(project_id)
        return self._projects.save(self._build(data, project_id=int(project_id)))

    def get(self, project_id: int) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise NotFoundError(f"Project {project_id} not found")
        return project

    def list_all(self) -> Sequence[Project]:
        return sorted(self._projects.list_all(), key=lambda p: p.id)

    def list_page(
        self, *, page: int, size: int, name: Optional[str] = None, status: Optional[str] = None
    ) -> Page[Project]:
        rows = list(self._projects.find_by_name_containing(name)) if name else list(self._projects.list_all())
        if status:
            wanted = require_enum(status, ProjectStatus, "Status")
            rows = [p for p in rows if p.status == wanted]
        return paginate(rows, page=page, size=size, key=lambda p: p.id)

    def list_by_status(self, status: str) -> Sequence[Project]:
        wanted = require_enum(status, ProjectStatus, "Status")
        return sorted(self._projects.find_by_status(wanted), key=lambda p: p.id)

    def name_map(self) -> dict[int, str]:
        return {p.id: p.name for p in self._projects.list_all()}

    def delete(self, project_id: int) -> None:
        # Schedules and progress entries keep their project_id.
        if not self._projects.delete(project_id):
            raise NotFoundError(f"Project {project_id} not found")
        log.info("Deleted project %s", project_id)


class ProgressService:
    """Use case: section progress reporting.

    An entry is *delayed* when actual progress trails the plan, or when its
    planned end date has passed and it is not completed.
    """

    def __init__(self, progress: ProgressRepository, projects: ProjectRepository):
        self._progress = progress
        self._projects = projects

    def _build(
        self, data: Mapping[str, Any], *, progress_id: Optional[int] = None, now: Optional[datetime] = None
    ) -> Progress:
        project_id = require_positive_id(data.get("project_id"), "Project")
        if not self._projects.get_by_id(project_id):
            raise ValidationError(f"Project {project_id} does not exist")

        start = optional_date(data.get("start_date"), "start date")
        planned_end = optional_date(data.get("planned_end_date"), "planned end date")
        if start and planned_end and planned_end < start:
            raise ValidationError("Planned end date must not be before start date")

        return Progress(
            id=progress_id,
            project_id=project_id,
            section=optional_text(data.get("section")),
            planned_progress=require_percent(data.get("planned_progress"), "Planned progress"),
            actual_progress=require_percent(data.get("actual_progress"), "Actual progress"),
            start_date=start,
            planned_end_date=planned_end,
            actual_end_date=optional_date(data.get("actual_end_date"), "actual end date"),
            status=require_enum(data.get("status"), ProgressStatus, "Status", default=ProgressStatus.IN_PROGRESS),
            description=optional_text(data.get("description")),
            obstacles=optional_text(data.get("obstacles")),
            solutions=optional_text(data.get("solutions")),
            update_time=(now or now_local()).replace(microsecond=0),
            updated_by=optional_text(data.get("updated_by")),
            remarks=optional_text(data.get("remarks")),
        )

    def create(self, data: Mapping[str, Any], *, now: Optional[datetime] = None) -> Progress:
        entry = self._progress.save(self._build(data, now=now))
        log.info("Recorded progress %s for project %s", entry.id, entry.project_id)
        return entry

    def update(self, progress_id: int, data: Mapping[str, Any], *, now: Optional[datetime] = None) -> Progress:
        self.get(progress_id)
        return self._progress.save(self._build(data, progress_id=int(progress_id), now=now))

    def save(self, data: Mapping[str, Any], *, progress_id: Optional[int] = None) -> Progress:
        if progress_id:
            return self.update(progress_id, data)
        return self.create(data)

    def get(self, progress_id: int) -> Progress:
        entry = self._progress.get_by_id(progress_id)
        if not entry:
            raise NotFoundError(f"Progress entry {progress_id} not found")
        return entry

    def list_filtered(self, *, project_id: Optional[int] = None, status: Optional[str] = None) -> list[Progress]:
        rows = list(self._progress.find_by_project(project_id)) if project_id else list(self._progress.list_all())
        if status:
            wanted = require_enum(status, ProgressStatus, "Status")
            rows = [p for p in rows if p.status == wanted]
        return sorted(rows, key=lambda p: p.id)

    def list_page(
        self, *, page: int, size: int, project_id: Optional[int] = None, status: Optional[str] = None
    ) -> Page[Progress]:
        return paginate(self.list_filtered(project_id=project_id, status=status), page=page, size=size)

    def list_by_project(self, project_id: int) -> list[Progress]:
        return self.list_filtered(project_id=project_id)

    def list_delayed(self, *, today: Optional[date] = None) -> list[Progress]:
        today = today or today_local()
        rows = self._progress.find_planned_end_before(today)
        return sorted((p for p in rows if p.status != ProgressStatus.COMPLETED), key=lambda p: p.id)

    def list_behind_schedule(self) -> list[Progress]:
        return sorted(self._progress.find_behind_schedule(), key=lambda p: p.id)

    def is_delayed(self, entry: Progress, *, today: Optional[date] = None) -> bool:
        today = today or today_local()
        if (entry.actual_progress or 0) < (entry.planned_progress or 0):
            return True
        return (
            entry.planned_end_date is not None
            and entry.planned_end_date < today
            and entry.status != ProgressStatus.COMPLETED
        )

    def effective_status(self, entry: Progress, *, today: Optional[date] = None) -> ProgressStatus:
        if entry.status == ProgressStatus.COMPLETED:
            return ProgressStatus.COMPLETED
        if self.is_delayed(entry, today=today):
            return ProgressStatus.DELAYED
        return ProgressStatus.IN_PROGRESS

    def delete(self, progress_id: int) -> None:
        if not self._progress.delete(progress_id):
            raise NotFoundError(f"Progress entry {progress_id} not found")
