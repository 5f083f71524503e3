from __future__ import annotations

import logging
from collections import Counter, defaultdict
from datetime import date
from typing import Any, Mapping, Optional

from ..common.datetime_utils import optional_date, optional_datetime
from ..common.pagination import Page, paginate
from ..common.validators import optional_float, optional_text, require_enum, require_positive_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..workers.repository import WorkerRepository
from .calculator.base import WorkHoursCalculator
from .calculator.standard_calculator import StandardWorkHoursCalculator
from .model import AttendanceRecord
from .repository import AttendanceRepository

log = logging.getLogger(__name__)

STATUS_LABELS = {
    AttendanceStatus.NORMAL: "Normal",
    AttendanceStatus.LATE: "Late",
    AttendanceStatus.EARLY_LEAVE: "Early leave",
    AttendanceStatus.ABSENT: "Absent",
}

STATUS_CSS = {
    AttendanceStatus.NORMAL: "bg-success",
    AttendanceStatus.LATE: "bg-danger",
    AttendanceStatus.EARLY_LEAVE: "bg-warning text-dark",
    AttendanceStatus.ABSENT: "bg-secondary",
}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        workers: WorkerRepository,
        *,
        calculator: Optional[WorkHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._workers = workers
        self._calculator = calculator or StandardWorkHoursCalculator()

    def _build(self, data: Mapping[str, Any], *, attendance_id: Optional[int] = None) -> AttendanceRecord:
        worker_id = require_positive_id(data.get("worker_id"), "Worker")
        if not self._workers.get_by_id(worker_id):
            raise ValidationError(f"Worker {worker_id} does not exist")

        work_date = optional_date(data.get("date"), "date")
        if work_date is None:
            raise ValidationError("Date is required")

        check_in = optional_datetime(data.get("check_in_time"), "check-in time")
        check_out = optional_datetime(data.get("check_out_time"), "check-out time")
        if check_in and check_out and check_out < check_in:
            raise ValidationError("Check-out time must not be before check-in time")

        work_hours = optional_float(data.get("work_hours"), "Work hours")
        if work_hours is None:
            work_hours = self._calculator.work_hours(check_in, check_out) if check_in and check_out else 0.0
        overtime = optional_float(data.get("overtime_hours"), "Overtime hours")
        if overtime is None:
            overtime = self._calculator.overtime_hours(work_hours)
        if work_hours < 0 or overtime < 0:
            raise ValidationError("Hours must not be negative")

        return AttendanceRecord(
            id=attendance_id,
            worker_id=worker_id,
            date=work_date,
            status=require_enum(data.get("status"), AttendanceStatus, "Status", default=AttendanceStatus.NORMAL),
            check_in_time=check_in,
            check_out_time=check_out,
            work_hours=work_hours,
            overtime_hours=overtime,
            remarks=optional_text(data.get("remarks")),
        )

    def create(self, data: Mapping[str, Any]) -> AttendanceRecord:
        record = self._build(data)
        if self._attendance.get_for_worker_and_date(record.worker_id, record.date):
            raise ValidationError(f"Attendance for worker {record.worker_id} on {record.date} already exists")
        saved = self._attendance.save(record)
        log.info("Recorded attendance %s for worker %s on %s", saved.id, saved.worker_id, saved.date)
        return saved

    def update(self, attendance_id: int, data: Mapping[str, Any]) -> AttendanceRecord:
        self.get(attendance_id)
        record = self._build(data, attendance_id=int(attendance_id))
        existing = self._attendance.get_for_worker_and_date(record.worker_id, record.date)
        if existing and existing.id != record.id:
            raise ValidationError(f"Attendance for worker {record.worker_id} on {record.date} already exists")
        return self._attendance.save(record)

    def save(self, data: Mapping[str, Any], *, attendance_id: Optional[int] = None) -> AttendanceRecord:
        if attendance_id:
            return self.update(attendance_id, data)
        return self.create(data)

    def get(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError(f"Attendance record {attendance_id} not found")
        return record

    def get_for_worker_and_date(self, worker_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_worker_and_date(worker_id, work_date)

    def list_page(
        self,
        *,
        page: int,
        size: int,
        worker_id: Optional[int] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
        status: Optional[str] = None,
    ) -> Page[AttendanceRecord]:
        if worker_id is not None:
            rows = list(self._attendance.find_by_worker(worker_id))
        elif start and end:
            rows = list(self._attendance.find_by_date_between(start, end))
        else:
            rows = list(self._attendance.list_all())

        if start:
            rows = [r for r in rows if r.date >= start]
        if end:
            rows = [r for r in rows if r.date <= end]
        if status:
            wanted = require_enum(status, AttendanceStatus, "Status")
            rows = [r for r in rows if r.status == wanted]
        return paginate(rows, page=page, size=size, key=lambda r: (r.date, r.id), reverse=True)

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete(attendance_id):
            raise NotFoundError(f"Attendance record {attendance_id} not found")

    def statistics(self, start: date, end: date) -> dict:
        if end < start:
            raise ValidationError("End date must not be before start date")

        rows = self._attendance.find_by_date_between(start, end)
        by_status = Counter(r.status for r in rows)
        hours: dict[int, float] = defaultdict(float)
        overtime: dict[int, float] = defaultdict(float)
        for r in rows:
            hours[r.worker_id] += r.work_hours or 0.0
            overtime[r.worker_id] += r.overtime_hours or 0.0

        names = {w.id: w.name for w in self._workers.list_all()}
        per_worker = [
            {
                "worker_id": worker_id,
                "worker_name": names.get(worker_id, f"#{worker_id}"),
                "work_hours": round(total, 1),
                "overtime_hours": round(overtime[worker_id], 1),
            }
            for worker_id, total in hours.items()
        ]
        per_worker.sort(key=lambda x: x["work_hours"], reverse=True)

        return {
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
            "total_records": len(rows),
            "by_status": {s.value: by_status.get(s, 0) for s in AttendanceStatus},
            "per_worker": per_worker,
        }

    def to_ui(self, r: AttendanceRecord) -> dict:
        return {
            "id": r.id,
            "worker_id": r.worker_id,
            "date": r.date.strftime("%Y-%m-%d"),
            "check_in": r.check_in_time.strftime("%H:%M") if r.check_in_time else "-",
            "check_out": r.check_out_time.strftime("%H:%M") if r.check_out_time else "-",
            "status": STATUS_LABELS.get(r.status, r.status.value),
            "css_class": STATUS_CSS.get(r.status, "bg-secondary"),
            "work_hours": r.work_hours,
            "overtime_hours": r.overtime_hours,
        }
