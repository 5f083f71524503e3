from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import SafetyStatus, SeverityLevel


@dataclass(frozen=True)
class SafetyRecord:
    """A safety incident or hazard observed on site.

    ``worker_name`` and ``project_name`` are copied at save time so the record
    still reads correctly after the worker or project is removed.
    """

    event_type: str
    occurrence_time: datetime
    worker_id: Optional[int] = None
    worker_name: Optional[str] = None
    project_id: Optional[int] = None
    project_name: Optional[str] = None
    severity_level: SeverityLevel = SeverityLevel.LOW
    location: Optional[str] = None
    description: Optional[str] = None
    status: SafetyStatus = SafetyStatus.OPEN
    measures: Optional[str] = None
    handler: Optional[str] = None
    remarks: Optional[str] = None
    id: Optional[int] = None
