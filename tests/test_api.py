import pytest


def _create_worker(client, name="Tran Van Hai", id_card="110101199001010011"):
    resp = client.post("/api/workers", json={"name": name, "id_card": id_card, "position": "paver"})
    assert resp.status_code == 201
    return resp.get_json()


def test_worker_crud_over_json(client):
    worker = _create_worker(client)
    assert worker["id"] == 1
    assert worker["status"] == "active"

    resp = client.get("/api/workers/1")
    assert resp.status_code == 200
    assert resp.get_json()["id_card"] == "110101199001010011"

    resp = client.put("/api/workers/1", json={"name": "Tran Van Hai", "id_card": "110101199001010011", "age": 30})
    assert resp.get_json()["age"] == 30

    listing = client.get("/api/workers?page=1&size=10").get_json()
    assert listing["total_items"] == 1
    assert listing["workers"][0]["name"] == "Tran Van Hai"

    assert client.delete("/api/workers/1").get_json()["success"] is True
    assert client.get("/api/workers/1").status_code == 404


def test_missing_entity_is_404_json(client):
    resp = client.get("/api/schedules/99")
    assert resp.status_code == 404
    assert resp.get_json() == {"success": False, "message": "Schedule 99 not found"}


def test_invalid_input_is_400_json(client):
    resp = client.post("/api/workers", json={"name": "No Card"})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    resp = client.post("/api/workers", data="not json", content_type="application/json")
    assert resp.status_code == 400


def test_schedule_conflict_endpoint(client):
    _create_worker(client)
    first = client.post(
        "/api/schedules", json={"worker_id": 1, "date": "2025-05-12", "start_time": "08:00", "end_time": "16:00"}
    ).get_json()
    second = client.post(
        "/api/schedules", json={"worker_id": 1, "date": "2025-05-12", "start_time": "15:00", "end_time": "18:00"}
    ).get_json()
    assert second["has_conflict"] is True

    body = client.get(f"/api/schedules/{first['id']}/conflict").get_json()
    assert body["has_conflict"] is True
    assert body["conflicting_ids"] == [second["id"]]


def test_weather_lookup_is_stable(client):
    first = client.get("/api/weather?location=K120&date=2025-05-12").get_json()
    second = client.get("/api/weather?location=K120&date=2025-05-12").get_json()
    assert first == second
    assert first["date"] == "2025-05-12"


def test_weather_check_and_suggestion(client):
    reading = {"temperature": 33, "rainfall": 0, "wind_speed": 2}
    assert client.post("/api/weather/check", json=reading).get_json() == {"suitable_for_work": True}
    text = client.post("/api/weather/suggestion", json=reading).get_json()["work_suggestion"]
    assert "heatstroke" in text


def test_weather_requires_location(client):
    assert client.get("/api/weather").status_code == 400


def test_safety_api_and_statistics(client):
    resp = client.post(
        "/safety/api/records",
        json={"event_type": "no helmet", "occurrence_time": "2025-05-12T09:00", "severity_level": "medium"},
    )
    assert resp.status_code == 201
    stats = client.get("/safety/api/records/statistics").get_json()
    assert stats["by_severity"]["medium"] == 1
    assert client.get("/safety/api/records/severity/unknown").status_code == 400


def test_progress_api_reports_effective_status(client):
    project = client.post("/api/projects", json={"name": "G15 Section 3"}).get_json()
    entry = client.post(
        "/api/progress",
        json={"project_id": project["id"], "planned_progress": 60, "actual_progress": 30},
    ).get_json()
    assert entry["effective_status"] == "delayed"
    assert [p["id"] for p in client.get("/api/progress/behind-schedule").get_json()] == [entry["id"]]


@pytest.mark.parametrize(
    "path",
    ["/", "/workers", "/workers/add", "/attendance", "/attendance/add", "/attendance/statistics",
     "/schedule", "/schedule/add", "/safety", "/safety/add", "/safety/search", "/progress", "/progress/create"],
)
def test_pages_render(client, path):
    assert client.get(path).status_code == 200


def test_pager_links_to_neighbouring_pages(client):
    for n in range(5):
        _create_worker(client, name=f"Worker {n + 1}", id_card=f"ID{n + 1:03d}")

    middle = client.get("/workers?page=2&size=2").data
    assert b"Previous" in middle and b"Next" in middle
    assert b"page-item disabled" not in middle

    last = client.get("/workers?page=3&size=2").data
    assert last.count(b"page-item disabled") == 1


def test_offset_timestamp_is_400_and_listing_still_works(client):
    ok = client.post("/safety/api/records", json={"event_type": "no helmet", "occurrence_time": "2025-05-12T11:00"})
    assert ok.status_code == 201
    resp = client.post(
        "/safety/api/records", json={"event_type": "no helmet", "occurrence_time": "2025-05-12T10:00+07:00"}
    )
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False

    listing = client.get("/safety/api/records")
    assert listing.status_code == 200
    assert listing.get_json()["total_items"] == 1


def test_unknown_page_renders_404(client):
    resp = client.get("/workers/view/77")
    assert resp.status_code == 404
    assert b"Worker 77 not found" in resp.data


def test_form_with_bad_date_flashes_and_redirects(client):
    _create_worker(client)
    resp = client.post("/attendance/save", data={"worker_id": "1", "date": "12/05/2025"})
    assert resp.status_code == 302
    assert resp.headers["Location"].endswith("/attendance/add")

    page = client.get("/attendance/add")
    assert b"Invalid date: 12/05/2025" in page.data


def test_seeded_pages_render(app, client):
    from src.highway_workforce.highway_workforce.storage.seed import seed_demo_data

    container = app.extensions["highway_workforce"]
    assert seed_demo_data(container) is True
    assert seed_demo_data(container) is False

    for path in ("/", "/workers", "/attendance", "/schedule", "/safety", "/progress", "/progress/project/1",
                 "/attendance/worker/1", "/attendance/view/1", "/workers/view/1", "/schedule/edit/1",
                 "/safety/edit/1", "/progress/edit/1"):
        assert client.get(path).status_code == 200, path


def test_seed_cli_command(app):
    result = app.test_cli_runner().invoke(args=["seed-data"])
    assert "Demo data written" in result.output
