from datetime import date

import pytest

from src.highway_workforce.highway_workforce.container import build_container
from src.highway_workforce.highway_workforce.core.exceptions import NotFoundError, ValidationError

DAY = "2025-05-12"


def _shift(worker_id, start, end, **extra):
    data = {"worker_id": worker_id, "date": DAY, "start_time": start, "end_time": end}
    data.update(extra)
    return data


def test_conflict_flag_is_cached_on_the_new_shift(container, worker):
    svc = container.schedule_service
    first = svc.create(_shift(worker.id, "08:00", "16:00"))
    second = svc.create(_shift(worker.id, "15:59", "20:00"))

    assert first.has_conflict is False
    assert second.has_conflict is True
    assert f"#{first.id}" in second.conflict_description
    assert svc.check_conflict(second.id)
    assert [s.id for s in svc.get_conflicting_schedules(first.id)] == [second.id]


def test_back_to_back_shifts_are_clean(container, worker):
    svc = container.schedule_service
    svc.create(_shift(worker.id, "08:00", "16:00"))
    evening = svc.create(_shift(worker.id, "16:00", "24:00"))
    assert evening.has_conflict is False
    assert evening.conflict_description is None


def test_end_must_follow_start(container, worker):
    with pytest.raises(ValidationError):
        container.schedule_service.create(_shift(worker.id, "16:00", "08:00"))


def test_unknown_worker_is_rejected(container):
    with pytest.raises(ValidationError):
        container.schedule_service.create(_shift(999, "08:00", "16:00"))


def test_weather_is_copied_onto_located_shifts(container, worker):
    saved = container.schedule_service.create(_shift(worker.id, "08:00", "16:00", location="K120"))
    info = container.weather_service.get_weather_info("K120", date(2025, 5, 12))

    assert saved.weather_condition == info.weather_condition
    assert saved.temperature == info.temperature
    assert saved.suitable_for_work == info.suitable_for_work
    assert saved.weather_impact.startswith(("Suitable", "Unsuitable"))


def test_missing_weather_leaves_fields_empty(data_dir):
    container = build_container(data_dir=data_dir, weather_simulation_enabled=False)
    w = container.worker_service.create({"name": "A", "id_card": "X1"})
    saved = container.schedule_service.create(_shift(w.id, "08:00", "16:00", location="K120"))
    assert saved.weather_condition is None
    assert saved.suitable_for_work is None


def test_refresh_weather_for_picks_up_observation(container, worker):
    svc = container.schedule_service
    saved = svc.create(_shift(worker.id, "08:00", "16:00", location="K121"))
    container.weather_service.record_observation(
        {"location": "K121", "date": DAY, "weather_condition": "heavy_rain",
         "temperature": 12, "rainfall": 18, "wind_speed": 4}
    )

    refreshed = svc.refresh_weather_for(date(2025, 5, 12), "K121")
    assert [s.id for s in refreshed] == [saved.id]
    assert refreshed[0].suitable_for_work is False
    assert refreshed[0].weather_impact == "Unsuitable for construction: rainfall too heavy"
    assert svc.schedule_suggestion(date(2025, 5, 12), "K121").startswith("Construction not recommended")


def test_work_hour_warnings(data_dir):
    container = build_container(data_dir=data_dir, max_continuous_work_hours=10, min_rest_hours=8)
    w = container.worker_service.create({"name": "A", "id_card": "X1"})
    svc = container.schedule_service
    svc.create({"worker_id": w.id, "date": "2025-05-11", "start_time": "14:00", "end_time": "24:00"})
    long_shift = svc.create(_shift(w.id, "05:00", "17:00"))

    warnings = svc.work_hour_warnings(long_shift.id)
    assert len(warnings) == 2
    assert "12.0h" in warnings[0]
    assert "5.0h rest" in warnings[1]


def test_filtered_listing_orders_by_date_then_start(container, worker):
    svc = container.schedule_service
    svc.create({"worker_id": worker.id, "date": "2025-05-13", "start_time": "08:00", "end_time": "10:00"})
    svc.create(_shift(worker.id, "12:00", "14:00"))
    svc.create(_shift(worker.id, "08:00", "10:00"))

    rows = svc.list_filtered(worker_id=worker.id)
    assert [(s.date.isoformat(), s.start_time.hour) for s in rows] == [
        ("2025-05-12", 8), ("2025-05-12", 12), ("2025-05-13", 8),
    ]
    assert len(svc.list_filtered(day=date(2025, 5, 13))) == 1


def test_start_time_with_utc_offset_is_rejected(container, worker):
    with pytest.raises(ValidationError):
        container.schedule_service.create(_shift(worker.id, "08:00+07:00", "16:00"))
    assert container.schedule_service.list_filtered(worker_id=worker.id) == []


def test_deleting_worker_keeps_dependent_records(container, worker):
    shift = container.schedule_service.create(_shift(worker.id, "08:00", "16:00"))
    attendance = container.attendance_service.create(
        {"worker_id": worker.id, "date": DAY, "check_in_time": f"{DAY}T08:00", "check_out_time": f"{DAY}T16:00"}
    )
    incident = container.safety_service.create(
        {"event_type": "no helmet", "occurrence_time": f"{DAY}T09:15", "worker_id": worker.id}
    )
    container.worker_service.delete(worker.id)

    assert container.schedule_service.get(shift.id).worker_id == worker.id
    assert container.attendance_service.get(attendance.id).worker_id == worker.id
    kept = container.safety_service.get(incident.id)
    assert kept.worker_id == worker.id
    assert kept.worker_name == worker.name
    with pytest.raises(NotFoundError):
        container.worker_service.get(worker.id)
