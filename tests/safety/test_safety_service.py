from datetime import date

import pytest

from src.highway_workforce.highway_workforce.core.enums import SeverityLevel
from src.highway_workforce.highway_workforce.core.exceptions import ValidationError


@pytest.fixture
def project(container):
    return container.project_service.create({"name": "G15 Section 3", "status": "in_progress"})


def _incident(**extra):
    data = {"event_type": "fall hazard", "occurrence_time": "2025-05-12T10:30", "severity_level": "high"}
    data.update(extra)
    return data


def test_names_are_copied_from_worker_and_project(container, worker, project):
    rec = container.safety_service.create(_incident(worker_id=worker.id, project_id=project.id))
    assert rec.worker_name == worker.name
    assert rec.project_name == project.name

    container.worker_service.delete(worker.id)
    assert container.safety_service.get(rec.id).worker_name == worker.name


def test_event_type_and_time_are_required(container):
    with pytest.raises(ValidationError):
        container.safety_service.create({"occurrence_time": "2025-05-12T10:30"})
    with pytest.raises(ValidationError):
        container.safety_service.create({"event_type": "fall hazard"})


def test_occurrence_time_with_utc_offset_is_rejected(container):
    svc = container.safety_service
    svc.create(_incident(occurrence_time="2025-05-12T11:00"))
    with pytest.raises(ValidationError):
        svc.create(_incident(occurrence_time="2025-05-12T10:00+07:00"))

    page = svc.list_page(page=1, size=10)
    assert page.total_items == 1
    assert svc.search(severity_level="high")[0].occurrence_time.tzinfo is None


def test_combined_search(container, worker, project):
    svc = container.safety_service
    svc.create(_incident(worker_id=worker.id, project_id=project.id))
    svc.create(_incident(event_type="no helmet", severity_level="low", occurrence_time="2025-05-20T09:00"))
    svc.create(_incident(status="resolved", occurrence_time="2025-04-01T09:00"))

    assert len(svc.search(severity_level="high")) == 2
    assert len(svc.search(worker_id=worker.id)) == 1
    assert [r.event_type for r in svc.search(start=date(2025, 5, 12), end=date(2025, 5, 12))] == ["fall hazard"]
    assert svc.search(event_type="no helmet", status="open")[0].severity_level == SeverityLevel.LOW


def test_statistics_group_by_severity_status_and_type(container):
    svc = container.safety_service
    svc.create(_incident())
    svc.create(_incident(severity_level="critical", status="processing"))
    svc.create(_incident(event_type="no helmet", severity_level="low"))

    stats = svc.statistics()
    assert stats["total_records"] == 3
    assert stats["by_severity"] == {"low": 1, "medium": 0, "high": 1, "critical": 1}
    assert stats["by_status"] == {"open": 2, "processing": 1, "resolved": 0}
    assert stats["by_event_type"] == {"fall hazard": 2, "no helmet": 1}
