from __future__ import annotations

from datetime import timedelta

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import optional_date, today_local
from ..common.http import dump, page_payload, request_json
from ..common.pagination import page_params
from ..common.validators import optional_int
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service
    workers = container.worker_service

    def _filters():
        return {
            "worker_id": optional_int(request.args.get("workerId"), "workerId"),
            "start": optional_date(request.args.get("startDate"), "start date"),
            "end": optional_date(request.args.get("endDate"), "end date"),
            "status": request.args.get("status") or None,
        }

    @app.route("/attendance", endpoint="attendance_list")
    def attendance_list():
        page, size = page_params(request.args)
        try:
            filters = _filters()
            result = service.list_page(page=page, size=size, **filters)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("attendance_list"))
        return render_template(
            "attendance/list.html",
            result=result,
            rows=[service.to_ui(r) for r in result.items],
            filters=request.args,
            worker_names=workers.name_map(),
            workers=workers.list_all(),
            statuses=list(AttendanceStatus),
            active_page="attendance",
        )

    @app.route("/attendance/add", endpoint="attendance_add")
    def attendance_add():
        return render_template(
            "attendance/form.html",
            record=None,
            workers=workers.list_all(),
            statuses=list(AttendanceStatus),
            active_page="attendance",
        )

    @app.route("/attendance/edit/<int:attendance_id>", endpoint="attendance_edit")
    def attendance_edit(attendance_id: int):
        return render_template(
            "attendance/form.html",
            record=service.get(attendance_id),
            workers=workers.list_all(),
            statuses=list(AttendanceStatus),
            active_page="attendance",
        )

    @app.route("/attendance/save", methods=["POST"], endpoint="attendance_save")
    def attendance_save():
        attendance_id = request.form.get("id", type=int)
        try:
            service.save(request.form.to_dict(), attendance_id=attendance_id)
            flash("Attendance record saved.", "success")
            return redirect(url_for("attendance_list"))
        except ValidationError as e:
            flash(str(e), "danger")
            if attendance_id:
                return redirect(url_for("attendance_edit", attendance_id=attendance_id))
            return redirect(url_for("attendance_add"))

    @app.route("/attendance/view/<int:attendance_id>", endpoint="attendance_view")
    def attendance_view(attendance_id: int):
        record = service.get(attendance_id)
        return render_template(
            "attendance/view.html",
            record=record,
            row=service.to_ui(record),
            worker_names=workers.name_map(),
            active_page="attendance",
        )

    @app.route("/attendance/delete/<int:attendance_id>", methods=["GET", "POST"], endpoint="attendance_delete")
    def attendance_delete(attendance_id: int):
        service.delete(attendance_id)
        flash("Attendance record deleted.", "success")
        return redirect(url_for("attendance_list"))

    @app.route("/attendance/worker/<int:worker_id>", endpoint="attendance_worker")
    def attendance_worker(worker_id: int):
        worker = workers.get(worker_id)
        page, size = page_params(request.args)
        result = service.list_page(page=page, size=size, worker_id=worker_id)
        return render_template(
            "attendance/list.html",
            result=result,
            rows=[service.to_ui(r) for r in result.items],
            filters={"workerId": str(worker_id)},
            worker=worker,
            worker_names=workers.name_map(),
            workers=workers.list_all(),
            statuses=list(AttendanceStatus),
            active_page="attendance",
        )

    @app.route("/attendance/statistics", endpoint="attendance_statistics")
    def attendance_statistics():
        today = today_local()
        try:
            start = optional_date(request.args.get("startDate"), "start date") or today - timedelta(days=30)
            end = optional_date(request.args.get("endDate"), "end date") or today
            stats = service.statistics(start, end)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("attendance_statistics"))
        return render_template("attendance/statistics.html", stats=stats, active_page="attendance")

    # ----- JSON API -----

    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance_list")
    def api_attendance_list():
        page, size = page_params(request.args)
        return jsonify(page_payload(service.list_page(page=page, size=size, **_filters()), "records"))

    @app.route("/api/attendance/<int:attendance_id>", methods=["GET"], endpoint="api_attendance_get")
    def api_attendance_get(attendance_id: int):
        return jsonify(dump(service.get(attendance_id)))

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_create")
    def api_attendance_create():
        return jsonify(dump(service.create(request_json()))), 201

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="api_attendance_update")
    def api_attendance_update(attendance_id: int):
        return jsonify(dump(service.update(attendance_id, request_json())))

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    def api_attendance_delete(attendance_id: int):
        service.delete(attendance_id)
        return jsonify({"success": True, "message": "Attendance record deleted"})
