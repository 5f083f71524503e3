from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import optional_date
from ..common.http import dump, dump_all, page_payload, request_id_list, request_json
from ..common.pagination import page_params
from ..common.validators import optional_int
from ..core.enums import SafetyStatus, SeverityLevel
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.safety_service

    def _render_list(records, *, result=None, criteria=None):
        return render_template(
            "safety/list.html",
            records=records,
            result=result,
            criteria=criteria or {},
            workers=container.worker_service.list_all(),
            projects=container.project_service.list_all(),
            severities=list(SeverityLevel),
            statuses=list(SafetyStatus),
            active_page="safety",
        )

    def _render_form(record):
        return render_template(
            "safety/form.html",
            record=record,
            workers=container.worker_service.list_all(),
            projects=container.project_service.list_all(),
            severities=list(SeverityLevel),
            statuses=list(SafetyStatus),
            active_page="safety",
        )

    # ----- server-rendered pages -----

    @app.route("/safety", endpoint="safety_list")
    def safety_list():
        page, size = page_params(request.args)
        result = service.list_page(page=page, size=size)
        return _render_list(result.items, result=result)

    @app.route("/safety/search", endpoint="safety_search")
    def safety_search():
        args = request.args
        try:
            records = service.search(
                worker_id=optional_int(args.get("workerId"), "workerId"),
                project_id=optional_int(args.get("projectId"), "projectId"),
                event_type=args.get("eventType") or None,
                severity_level=args.get("severityLevel") or None,
                status=args.get("status") or None,
                start=optional_date(args.get("startDate"), "start date"),
                end=optional_date(args.get("endDate"), "end date"),
            )
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("safety_list"))
        return _render_list(records, criteria=args)

    @app.route("/safety/add", endpoint="safety_add")
    def safety_add():
        return _render_form(None)

    @app.route("/safety/edit/<int:record_id>", endpoint="safety_edit")
    def safety_edit(record_id: int):
        return _render_form(service.get(record_id))

    @app.route("/safety/save", methods=["POST"], endpoint="safety_save")
    def safety_save():
        record_id = request.form.get("id", type=int)
        try:
            service.save(request.form.to_dict(), record_id=record_id)
            flash("Safety record saved.", "success")
            return redirect(url_for("safety_list"))
        except ValidationError as e:
            flash(str(e), "danger")
            if record_id:
                return redirect(url_for("safety_edit", record_id=record_id))
            return redirect(url_for("safety_add"))

    @app.route("/safety/delete/<int:record_id>", methods=["GET", "POST"], endpoint="safety_delete")
    def safety_delete(record_id: int):
        service.delete(record_id)
        flash("Safety record deleted.", "success")
        return redirect(url_for("safety_list"))

    # ----- JSON API -----

    @app.route("/safety/api/records", methods=["GET"], endpoint="api_safety_list")
    def api_safety_list():
        page, size = page_params(request.args)
        return jsonify(page_payload(service.list_page(page=page, size=size), "records"))

    @app.route("/safety/api/records/<int:record_id>", methods=["GET"], endpoint="api_safety_get")
    def api_safety_get(record_id: int):
        return jsonify(dump(service.get(record_id)))

    @app.route("/safety/api/records", methods=["POST"], endpoint="api_safety_create")
    def api_safety_create():
        return jsonify(dump(service.create(request_json()))), 201

    @app.route("/safety/api/records/<int:record_id>", methods=["PUT"], endpoint="api_safety_update")
    def api_safety_update(record_id: int):
        return jsonify(dump(service.update(record_id, request_json())))

    @app.route("/safety/api/records/<int:record_id>", methods=["DELETE"], endpoint="api_safety_delete")
    def api_safety_delete(record_id: int):
        service.delete(record_id)
        return jsonify({"success": True, "message": "Safety record deleted"})

    @app.route("/safety/api/records", methods=["DELETE"], endpoint="api_safety_delete_batch")
    def api_safety_delete_batch():
        removed = service.delete_many(request_id_list())
        return jsonify({"success": True, "message": f"Deleted {removed} records", "deleted": removed})

    @app.route("/safety/api/records/worker/<int:worker_id>", endpoint="api_safety_by_worker")
    def api_safety_by_worker(worker_id: int):
        return jsonify(dump_all(service.list_by_worker(worker_id)))

    @app.route("/safety/api/records/project/<int:project_id>", endpoint="api_safety_by_project")
    def api_safety_by_project(project_id: int):
        return jsonify(dump_all(service.list_by_project(project_id)))

    @app.route("/safety/api/records/event-type/<event_type>", endpoint="api_safety_by_event_type")
    def api_safety_by_event_type(event_type: str):
        return jsonify(dump_all(service.list_by_event_type(event_type)))

    @app.route("/safety/api/records/severity/<severity>", endpoint="api_safety_by_severity")
    def api_safety_by_severity(severity: str):
        return jsonify(dump_all(service.list_by_severity(severity)))

    @app.route("/safety/api/records/status/<status>", endpoint="api_safety_by_status")
    def api_safety_by_status(status: str):
        return jsonify(dump_all(service.list_by_status(status)))

    @app.route("/safety/api/records/statistics", endpoint="api_safety_statistics")
    def api_safety_statistics():
        return jsonify(service.statistics())
