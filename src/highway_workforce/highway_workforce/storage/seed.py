from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Optional

from ..common.datetime_utils import today_local
from ..container import Container

log = logging.getLogger(__name__)

DEMO_WORKERS = [
    {"name": "Nguyen Van An", "id_card": "110101199001011234", "gender": "male", "age": 34,
     "phone": "13800000001", "position": "foreman", "hire_date": "2019-03-01"},
    {"name": "Tran Thi Binh", "id_card": "110101199203152345", "gender": "female", "age": 32,
     "phone": "13800000002", "position": "surveyor", "hire_date": "2020-06-15"},
    {"name": "Le Van Cuong", "id_card": "110101198807203456", "gender": "male", "age": 36,
     "phone": "13800000003", "position": "paver operator", "hire_date": "2018-09-10"},
    {"name": "Pham Van Dung", "id_card": "110101199511304567", "gender": "male", "age": 29,
     "phone": "13800000004", "position": "laborer", "hire_date": "2022-02-20"},
]


def seed_demo_data(container: Container, *, today: Optional[date] = None) -> bool:
    """Fill an empty data directory with a small, consistent demo set.

    Returns False without touching anything when workers already exist.
    """
    if container.workers_repo.count():
        log.info("Workers present, skipping demo seed")
        return False

    today = today or today_local()
    workers = [container.worker_service.create(w) for w in DEMO_WORKERS]

    project = container.project_service.create(
        {
            "name": "G15 Expressway Section 3",
            "description": "Subgrade and pavement works, K120 to K135",
            "location": "Section 3",
            "start_date": (today - timedelta(days=60)).isoformat(),
            "end_date": (today + timedelta(days=120)).isoformat(),
            "status": "in_progress",
            "manager": "Nguyen Van An",
            "budget": 12500000,
            "progress": 35,
        }
    )

    for section, planned, actual, end_offset in (
        ("Subgrade", 80, 75, 20),
        ("Bridge abutments", 50, 50, 45),
        ("Drainage", 40, 20, -5),
    ):
        container.progress_service.create(
            {
                "project_id": project.id,
                "section": section,
                "planned_progress": planned,
                "actual_progress": actual,
                "start_date": (today - timedelta(days=60)).isoformat(),
                "planned_end_date": (today + timedelta(days=end_offset)).isoformat(),
                "updated_by": "Nguyen Van An",
            }
        )

    for offset in range(3):
        day = (today + timedelta(days=offset)).isoformat()
        for worker in workers:
            container.schedule_service.create(
                {
                    "worker_id": worker.id,
                    "project_id": project.id,
                    "date": day,
                    "shift_type": "day",
                    "start_time": "08:00",
                    "end_time": "16:00",
                    "location": "Section 3",
                }
            )

    yesterday = today - timedelta(days=1)
    for worker, check_in, check_out, status in (
        (workers[0], "07:55", "17:30", "normal"),
        (workers[1], "08:20", "16:05", "late"),
        (workers[2], "07:58", "15:00", "early_leave"),
    ):
        container.attendance_service.create(
            {
                "worker_id": worker.id,
                "date": yesterday.isoformat(),
                "check_in_time": f"{yesterday.isoformat()}T{check_in}",
                "check_out_time": f"{yesterday.isoformat()}T{check_out}",
                "status": status,
            }
        )

    container.safety_service.create(
        {
            "worker_id": workers[3].id,
            "project_id": project.id,
            "event_type": "missing protective equipment",
            "severity_level": "medium",
            "occurrence_time": f"{yesterday.isoformat()}T10:30",
            "location": "Section 3 K127",
            "description": "Worker on paving line without reflective vest",
            "status": "resolved",
            "measures": "Vest issued, toolbox talk held",
            "handler": "Nguyen Van An",
        }
    )

    log.info("Seeded demo data: %d workers, project %s", len(workers), project.id)
    return True
