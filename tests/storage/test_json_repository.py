import json
from datetime import date, datetime, time

from src.highway_workforce.highway_workforce.container import build_container
from src.highway_workforce.highway_workforce.core.enums import WorkerStatus
from src.highway_workforce.highway_workforce.schedules.json_schedule_repository import JsonScheduleRepository
from src.highway_workforce.highway_workforce.storage.json_store import JsonFileStore
from src.highway_workforce.highway_workforce.workers.json_worker_repository import JsonWorkerRepository
from src.highway_workforce.highway_workforce.workers.model import Worker


class BrokenStore(JsonFileStore):
    def write_list(self, path, rows):
        raise OSError("disk full")


def test_round_trip_and_id_counter_resume(tmp_path):
    path = tmp_path / "workers.json"
    repo = JsonWorkerRepository(path)
    a = repo.save(Worker(name="A", id_card="1", hire_date=date(2024, 3, 1), status=WorkerStatus.ON_LEAVE))
    b = repo.save(Worker(name="B", id_card="2"))
    repo.delete(b.id)

    reloaded = JsonWorkerRepository(path)
    assert reloaded.list_all() == [a]
    assert reloaded.next_id == a.id + 1

    c = reloaded.save(Worker(name="C", id_card="3"))
    assert c.id == 2


def test_ids_are_not_reused_within_a_run(tmp_path):
    repo = JsonWorkerRepository(tmp_path / "workers.json")
    first = repo.save(Worker(name="A", id_card="1"))
    repo.delete(first.id)
    assert repo.save(Worker(name="B", id_card="2")).id == first.id + 1


def test_file_is_pretty_printed_snake_case_iso(tmp_path):
    path = tmp_path / "workers.json"
    JsonWorkerRepository(path).save(Worker(name="A", id_card="1", hire_date=date(2024, 3, 1)))

    text = path.read_text(encoding="utf-8")
    rows = json.loads(text)
    assert text.startswith("[\n  {")
    assert rows[0]["id_card"] == "1"
    assert rows[0]["hire_date"] == "2024-03-01"
    assert rows[0]["status"] == "active"


def test_write_failure_keeps_memory_authoritative(tmp_path):
    repo = JsonWorkerRepository(tmp_path / "workers.json", store=BrokenStore())
    saved = repo.save(Worker(name="A", id_card="1"))

    assert repo.get_by_id(saved.id) == saved
    assert repo.flush() is False
    assert not (tmp_path / "workers.json").exists()


def test_corrupted_file_starts_empty(tmp_path):
    path = tmp_path / "workers.json"
    path.write_text("{not json", encoding="utf-8")

    repo = JsonWorkerRepository(path)
    assert repo.list_all() == []
    assert repo.save(Worker(name="A", id_card="1")).id == 1


def test_missing_or_empty_file_starts_empty(tmp_path):
    (tmp_path / "empty.json").write_text("", encoding="utf-8")
    assert JsonWorkerRepository(tmp_path / "empty.json").count() == 0
    assert JsonWorkerRepository(tmp_path / "absent.json").count() == 0


def test_delete_many_counts_only_existing(tmp_path):
    repo = JsonWorkerRepository(tmp_path / "workers.json")
    ids = [repo.save(Worker(name=n, id_card=n)).id for n in "abc"]
    assert repo.delete_many([ids[0], ids[2], 99]) == 2
    assert [w.name for w in repo.list_all()] == ["b"]


def test_every_entity_survives_a_restart(tmp_path):
    data_dir = tmp_path / "data"
    first = build_container(data_dir=data_dir, weather_random_seed=7)
    worker = first.worker_service.create({"name": "Tran Van Hai", "id_card": "110101199001010011"})
    project = first.project_service.create({"name": "G15 Section 3", "start_date": "2025-05-01", "budget": "1250000.5"})
    shift = first.schedule_service.create(
        {"worker_id": worker.id, "date": "2025-05-12", "start_time": "16:00", "end_time": "24:00",
         "project_id": project.id, "location": "KM 12+300", "status": "confirmed"}
    )
    overlapping = first.schedule_service.create(
        {"worker_id": worker.id, "date": "2025-05-12", "start_time": "20:00", "end_time": "22:00"}
    )
    attendance = first.attendance_service.create(
        {"worker_id": worker.id, "date": "2025-05-12",
         "check_in_time": "2025-05-12T07:45", "check_out_time": "2025-05-12T17:30"}
    )
    incident = first.safety_service.create(
        {"event_type": "fall hazard", "occurrence_time": "2025-05-12T10:30", "severity_level": "critical",
         "worker_id": worker.id, "project_id": project.id}
    )
    progress = first.progress_service.create(
        {"project_id": project.id, "planned_progress": 60, "actual_progress": 45, "planned_end_date": "2025-06-30"},
        now=datetime(2025, 5, 12, 18, 0),
    )

    assert shift.end_time == time(0, 0)
    assert shift.weather_condition is not None
    assert overlapping.has_conflict is True

    second = build_container(data_dir=data_dir, weather_random_seed=7)
    assert second.worker_service.get(worker.id) == worker
    assert second.project_service.get(project.id) == project
    assert second.schedule_service.get(shift.id) == shift
    assert second.schedule_service.get(overlapping.id) == overlapping
    assert second.attendance_service.get(attendance.id) == attendance
    assert second.safety_service.get(incident.id) == incident
    assert second.progress_service.get(progress.id) == progress
    assert second.weather_service.get_weather_info("KM 12+300", date(2025, 5, 12)).weather_condition == shift.weather_condition


def test_string_in_boolean_field_is_a_load_error(tmp_path):
    path = tmp_path / "schedules.json"
    row = {"worker_id": 1, "date": "2025-05-12", "start_time": "08:00:00", "end_time": "16:00:00",
           "has_conflict": "false", "id": 1}
    path.write_text(json.dumps([row]), encoding="utf-8")

    assert JsonScheduleRepository(path).list_all() == []

    row["has_conflict"] = False
    path.write_text(json.dumps([row]), encoding="utf-8")
    assert JsonScheduleRepository(path).list_all()[0].has_conflict is False
