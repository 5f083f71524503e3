from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import optional_date, today_local
from ..common.http import dump, dump_all, page_payload, request_id_list, request_json
from ..common.pagination import page_params
from ..common.validators import optional_int, require_non_empty
from ..core.enums import ScheduleStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.schedule_service

    def _filters(args) -> dict:
        return {
            "worker_id": optional_int(args.get("workerId"), "workerId"),
            "project_id": optional_int(args.get("projectId"), "projectId"),
            "day": optional_date(args.get("date"), "date"),
            "location": args.get("location") or None,
            "start": optional_date(args.get("startDate"), "start date"),
            "end": optional_date(args.get("endDate"), "end date"),
        }

    def _render_form(schedule):
        return render_template(
            "schedule/form.html",
            schedule=schedule,
            workers=container.worker_service.list_all(),
            projects=container.project_service.list_all(),
            statuses=list(ScheduleStatus),
            active_page="schedule",
        )

    # ----- server-rendered pages -----

    @app.route("/schedule", endpoint="schedule_list")
    def schedule_list():
        page, size = page_params(request.args)
        try:
            filters = _filters(request.args)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("schedule_list"))

        result = service.list_page(page=page, size=size, **filters)
        return render_template(
            "schedule/list.html",
            result=result,
            filters=request.args,
            worker_names=container.worker_service.name_map(),
            active_page="schedule",
        )

    @app.route("/schedule/add", endpoint="schedule_add")
    def schedule_add():
        return _render_form(None)

    @app.route("/schedule/edit/<int:schedule_id>", endpoint="schedule_edit")
    def schedule_edit(schedule_id: int):
        return _render_form(service.get(schedule_id))

    @app.route("/schedule/save", methods=["POST"], endpoint="schedule_save")
    def schedule_save():
        schedule_id = request.form.get("id", type=int)
        try:
            saved = service.save(request.form.to_dict(), schedule_id=schedule_id)
            if saved.has_conflict:
                flash(f"Schedule saved with a conflict: {saved.conflict_description}", "warning")
            else:
                flash("Schedule saved.", "success")
            return redirect(url_for("schedule_list"))
        except ValidationError as e:
            flash(str(e), "danger")
            if schedule_id:
                return redirect(url_for("schedule_edit", schedule_id=schedule_id))
            return redirect(url_for("schedule_add"))

    @app.route("/schedule/delete/<int:schedule_id>", methods=["GET", "POST"], endpoint="schedule_delete")
    def schedule_delete(schedule_id: int):
        service.delete(schedule_id)
        flash("Schedule deleted.", "success")
        return redirect(url_for("schedule_list"))

    # ----- JSON API -----

    @app.route("/api/schedules", methods=["GET"], endpoint="api_schedules_list")
    def api_schedules_list():
        filters = _filters(request.args)
        if request.args.get("page") or request.args.get("size"):
            page, size = page_params(request.args)
            return jsonify(page_payload(service.list_page(page=page, size=size, **filters), "schedules"))
        return jsonify(dump_all(service.list_filtered(**filters)))

    @app.route("/api/schedules/<int:schedule_id>", methods=["GET"], endpoint="api_schedules_get")
    def api_schedules_get(schedule_id: int):
        return jsonify(dump(service.get(schedule_id)))

    @app.route("/api/schedules", methods=["POST"], endpoint="api_schedules_create")
    def api_schedules_create():
        return jsonify(dump(service.create(request_json()))), 201

    @app.route("/api/schedules/<int:schedule_id>", methods=["PUT"], endpoint="api_schedules_update")
    def api_schedules_update(schedule_id: int):
        return jsonify(dump(service.update(schedule_id, request_json())))

    @app.route("/api/schedules/<int:schedule_id>", methods=["DELETE"], endpoint="api_schedules_delete")
    def api_schedules_delete(schedule_id: int):
        service.delete(schedule_id)
        return jsonify({"success": True, "message": "Schedule deleted"})

    @app.route("/api/schedules", methods=["DELETE"], endpoint="api_schedules_delete_batch")
    def api_schedules_delete_batch():
        removed = service.delete_many(request_id_list())
        return jsonify({"success": True, "deleted": removed})

    @app.route("/api/schedules/<int:schedule_id>/conflict", methods=["GET"], endpoint="api_schedules_conflict")
    def api_schedules_conflict(schedule_id: int):
        conflicts = service.get_conflicting_schedules(schedule_id)
        return jsonify(
            {
                "has_conflict": bool(conflicts),
                "conflict_message": "Time conflict found" if conflicts else "No conflict found",
                "conflicting_ids": [s.id for s in conflicts],
            }
        )

    @app.route("/api/schedules/<int:schedule_id>/weather", methods=["POST"], endpoint="api_schedules_weather")
    def api_schedules_weather(schedule_id: int):
        schedule = service.refresh_weather(schedule_id)
        return jsonify(
            {
                "weather_condition": schedule.weather_condition.value if schedule.weather_condition else None,
                "suitable_for_work": schedule.suitable_for_work,
                "weather_impact": schedule.weather_impact,
            }
        )

    @app.route("/api/schedules/<int:schedule_id>/work-hours", methods=["GET"], endpoint="api_schedules_work_hours")
    def api_schedules_work_hours(schedule_id: int):
        warnings = service.work_hour_warnings(schedule_id)
        return jsonify({"valid": not warnings, "warnings": warnings})

    @app.route("/api/schedules/suggestion", methods=["GET"], endpoint="api_schedules_suggestion")
    def api_schedules_suggestion():
        location = require_non_empty(request.args.get("location"), "Location")
        day = optional_date(request.args.get("date"), "date") or today_local()
        return jsonify({"suggestion": service.schedule_suggestion(day, location)})

    @app.route("/api/schedules/weather/refresh", methods=["POST"], endpoint="api_schedules_refresh_weather")
    def api_schedules_refresh_weather():
        location = require_non_empty(request.args.get("location"), "Location")
        day = optional_date(request.args.get("date"), "date") or today_local()
        return jsonify(dump_all(service.refresh_weather_for(day, location)))
