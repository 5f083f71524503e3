from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def save(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_worker(self, worker_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_date_between(self, start: date, end: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def find_by_status(self, status: AttendanceStatus) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def delete(self, attendance_id: int) -> bool:
        raise NotImplementedError
