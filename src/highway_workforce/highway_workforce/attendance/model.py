from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one worker's attendance on one day."""

    worker_id: int
    date: date
    status: AttendanceStatus = AttendanceStatus.NORMAL
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    work_hours: float = 0.0
    overtime_hours: float = 0.0
    remarks: Optional[str] = None
    id: Optional[int] = None
