from datetime import date

import pytest

from src.highway_workforce.highway_workforce.core.enums import AttendanceStatus
from src.highway_workforce.highway_workforce.core.exceptions import NotFoundError, ValidationError


def _record(worker_id, day, check_in=None, check_out=None, **extra):
    data = {"worker_id": worker_id, "date": day}
    if check_in:
        data["check_in_time"] = f"{day}T{check_in}"
    if check_out:
        data["check_out_time"] = f"{day}T{check_out}"
    data.update(extra)
    return data


def test_hours_are_computed_when_not_given(container, worker):
    rec = container.attendance_service.create(_record(worker.id, "2025-05-12", "07:45", "17:30"))
    assert rec.work_hours == 9.8
    assert rec.overtime_hours == 1.8
    assert rec.status == AttendanceStatus.NORMAL


def test_explicit_hours_win(container, worker):
    rec = container.attendance_service.create(
        _record(worker.id, "2025-05-12", "08:00", "17:00", work_hours="8", overtime_hours="0.5")
    )
    assert rec.work_hours == 8.0
    assert rec.overtime_hours == 0.5


def test_check_out_before_check_in_is_rejected(container, worker):
    with pytest.raises(ValidationError):
        container.attendance_service.create(_record(worker.id, "2025-05-12", "17:00", "08:00"))


def test_malformed_time_is_a_validation_error(container, worker):
    with pytest.raises(ValidationError):
        container.attendance_service.create({"worker_id": worker.id, "date": "2025-05-12", "check_in_time": "8 o'clock"})


def test_time_with_utc_offset_is_rejected(container, worker):
    svc = container.attendance_service
    with pytest.raises(ValidationError):
        svc.create(_record(worker.id, "2025-05-12", "08:00+07:00", "17:00"))
    with pytest.raises(ValidationError):
        svc.create(_record(worker.id, "2025-05-12", "08:00", "17:00Z"))
    assert svc.get_for_worker_and_date(worker.id, date(2025, 5, 12)) is None


def test_one_record_per_worker_and_day(container, worker):
    svc = container.attendance_service
    svc.create(_record(worker.id, "2025-05-12"))
    with pytest.raises(ValidationError):
        svc.create(_record(worker.id, "2025-05-12"))
    assert svc.get_for_worker_and_date(worker.id, date(2025, 5, 12)) is not None


def test_listing_is_newest_first_and_filterable(container, worker):
    svc = container.attendance_service
    for day, status in (("2025-05-10", "late"), ("2025-05-11", "normal"), ("2025-05-12", "late")):
        svc.create(_record(worker.id, day, status=status))

    page = svc.list_page(page=1, size=10, worker_id=worker.id)
    assert [r.date.day for r in page.items] == [12, 11, 10]

    late = svc.list_page(page=1, size=10, status="late", start=date(2025, 5, 11))
    assert [r.date.day for r in late.items] == [12]


def test_statistics_totals_and_per_worker_hours(container, worker):
    other = container.worker_service.create({"name": "Le Thi Mai", "id_card": "110101199505050022"})
    svc = container.attendance_service
    svc.create(_record(worker.id, "2025-05-12", "08:00", "18:00"))
    svc.create(_record(worker.id, "2025-05-13", "08:00", "12:00", status="early_leave"))
    svc.create(_record(other.id, "2025-05-12", status="absent"))
    svc.create(_record(other.id, "2025-06-01", "08:00", "16:00"))

    stats = svc.statistics(date(2025, 5, 1), date(2025, 5, 31))
    assert stats["total_records"] == 3
    assert stats["by_status"] == {"normal": 1, "late": 0, "early_leave": 1, "absent": 1}
    assert stats["per_worker"][0] == {
        "worker_id": worker.id,
        "worker_name": worker.name,
        "work_hours": 14.0,
        "overtime_hours": 2.0,
    }


def test_delete_missing_record(container):
    with pytest.raises(NotFoundError):
        container.attendance_service.delete(42)
