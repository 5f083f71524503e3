from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ProgressStatus, ProjectStatus


@dataclass(frozen=True)
class Project:
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    manager: Optional[str] = None
    budget: Optional[float] = None
    progress: int = 0
    id: Optional[int] = None


@dataclass(frozen=True)
class Progress:
    """One progress report for a project section.

    Percentages are whole numbers between 0 and 100.
    """

    project_id: int
    section: Optional[str] = None
    planned_progress: int = 0
    actual_progress: int = 0
    start_date: Optional[date] = None
    planned_end_date: Optional[date] = None
    actual_end_date: Optional[date] = None
    status: ProgressStatus = ProgressStatus.IN_PROGRESS
    description: Optional[str] = None
    obstacles: Optional[str] = None
    solutions: Optional[str] = None
    update_time: Optional[datetime] = None
    updated_by: Optional[str] = None
    remarks: Optional[str] = None
    id: Optional[int] = None
