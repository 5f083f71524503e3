from __future__ import annotations

from flask import Flask, render_template

from ..common.datetime_utils import today_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="dashboard")
    def dashboard():
        today = today_local()
        counts = {
            "workers": container.workers_repo.count(),
            "projects": container.projects_repo.count(),
            "schedules_today": len(container.schedules_repo.find(lambda s: s.date == today)),
            "attendance_today": len(container.attendance_repo.find(lambda a: a.date == today)),
            "open_safety_records": len(container.safety_service.list_by_status("open")),
            "delayed_progress": len(container.progress_service.list_delayed(today=today)),
        }
        return render_template("dashboard.html", counts=counts, today=today, active_page="dashboard")
