from datetime import date, datetime

import pytest

from src.highway_workforce.highway_workforce.core.enums import ProgressStatus
from src.highway_workforce.highway_workforce.core.exceptions import ValidationError

TODAY = date(2025, 5, 12)


@pytest.fixture
def project(container):
    return container.project_service.create({"name": "G15 Section 3"})


def _entry(project_id, planned, actual, planned_end, **extra):
    data = {
        "project_id": project_id,
        "planned_progress": planned,
        "actual_progress": actual,
        "planned_end_date": planned_end,
    }
    data.update(extra)
    return data


def test_effective_status(container, project, fixed_now):
    svc = container.progress_service
    on_track = svc.create(_entry(project.id, 50, 50, "2025-06-01"), now=fixed_now)
    behind = svc.create(_entry(project.id, 60, 40, "2025-06-01"), now=fixed_now)
    overdue = svc.create(_entry(project.id, 90, 95, "2025-05-01"), now=fixed_now)
    done = svc.create(_entry(project.id, 100, 100, "2025-05-01", status="completed"), now=fixed_now)

    assert svc.effective_status(on_track, today=TODAY) == ProgressStatus.IN_PROGRESS
    assert svc.effective_status(behind, today=TODAY) == ProgressStatus.DELAYED
    assert svc.effective_status(overdue, today=TODAY) == ProgressStatus.DELAYED
    assert svc.effective_status(done, today=TODAY) == ProgressStatus.COMPLETED
    assert on_track.update_time == fixed_now


def test_delayed_and_behind_schedule_lists(container, project):
    svc = container.progress_service
    behind = svc.create(_entry(project.id, 60, 40, "2025-06-01"))
    overdue = svc.create(_entry(project.id, 90, 95, "2025-05-01"))
    svc.create(_entry(project.id, 100, 100, "2025-05-01", status="completed"))

    assert [p.id for p in svc.list_delayed(today=TODAY)] == [overdue.id]
    assert [p.id for p in svc.list_behind_schedule()] == [behind.id]


def test_percentages_must_be_in_range(container, project):
    with pytest.raises(ValidationError):
        container.progress_service.create(_entry(project.id, 120, 0, None))


def test_unknown_project_is_rejected(container):
    with pytest.raises(ValidationError):
        container.progress_service.create(_entry(404, 10, 10, None))


def test_project_name_search_is_paginated(container):
    svc = container.project_service
    for n in range(12):
        svc.create({"name": f"Bridge {n}"})
    svc.create({"name": "Tunnel"})

    page = svc.list_page(page=2, size=10, name="bridge")
    assert page.total_items == 12
    assert [p.name for p in page.items] == ["Bridge 10", "Bridge 11"]
