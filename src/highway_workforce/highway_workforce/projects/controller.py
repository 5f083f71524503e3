from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.http import dump, dump_all, page_payload, request_json
from ..common.pagination import page_params
from ..common.validators import optional_int
from ..core.enums import ProgressStatus, ProjectStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    projects = container.project_service
    progress = container.progress_service

    def _progress_form(entry):
        return render_template(
            "progress/form.html",
            entry=entry,
            projects=projects.list_all(),
            statuses=list(ProgressStatus),
            active_page="progress",
        )

    # ----- server-rendered pages -----

    @app.route("/progress", endpoint="progress_list")
    def progress_list():
        page, size = page_params(request.args)
        try:
            project_id = optional_int(request.args.get("projectId"), "projectId")
            status = request.args.get("status") or None
            result = progress.list_page(page=page, size=size, project_id=project_id, status=status)
        except ValidationError as e:
            flash(str(e), "danger")
            return redirect(url_for("progress_list"))
        return render_template(
            "progress/list.html",
            result=result,
            effective={p.id: progress.effective_status(p) for p in result.items},
            filters=request.args,
            projects=projects.list_all(),
            project_names=projects.name_map(),
            statuses=list(ProgressStatus),
            active_page="progress",
        )

    @app.route("/progress/create", endpoint="progress_create")
    def progress_create():
        return _progress_form(None)

    @app.route("/progress/edit/<int:progress_id>", endpoint="progress_edit")
    def progress_edit(progress_id: int):
        return _progress_form(progress.get(progress_id))

    @app.route("/progress/save", methods=["POST"], endpoint="progress_save")
    def progress_save():
        progress_id = request.form.get("id", type=int)
        try:
            progress.save(request.form.to_dict(), progress_id=progress_id)
            flash("Progress saved.", "success")
            return redirect(url_for("progress_list"))
        except ValidationError as e:
            flash(str(e), "danger")
            if progress_id:
                return redirect(url_for("progress_edit", progress_id=progress_id))
            return redirect(url_for("progress_create"))

    @app.route("/progress/delete/<int:progress_id>", methods=["GET", "POST"], endpoint="progress_delete")
    def progress_delete(progress_id: int):
        progress.delete(progress_id)
        flash("Progress entry deleted.", "success")
        return redirect(url_for("progress_list"))

    @app.route("/progress/project/<int:project_id>", endpoint="progress_project")
    def progress_project(project_id: int):
        project = projects.get(project_id)
        entries = progress.list_by_project(project_id)
        return render_template(
            "progress/project.html",
            project=project,
            entries=entries,
            effective={p.id: progress.effective_status(p) for p in entries},
            active_page="progress",
        )

    # ----- JSON API: projects -----

    @app.route("/api/projects", methods=["GET"], endpoint="api_projects_list")
    def api_projects_list():
        page, size = page_params(request.args)
        result = projects.list_page(
            page=page,
            size=size,
            name=request.args.get("name") or None,
            status=request.args.get("status") or None,
        )
        return jsonify(page_payload(result, "projects"))

    @app.route("/api/projects/<int:project_id>", methods=["GET"], endpoint="api_projects_get")
    def api_projects_get(project_id: int):
        return jsonify(dump(projects.get(project_id)))

    @app.route("/api/projects", methods=["POST"], endpoint="api_projects_create")
    def api_projects_create():
        return jsonify(dump(projects.create(request_json()))), 201

    @app.route("/api/projects/<int:project_id>", methods=["PUT"], endpoint="api_projects_update")
    def api_projects_update(project_id: int):
        return jsonify(dump(projects.update(project_id, request_json())))

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="api_projects_delete")
    def api_projects_delete(project_id: int):
        projects.delete(project_id)
        return jsonify({"success": True, "message": "Project deleted"})

    @app.route("/api/projects/status/<status>", endpoint="api_projects_by_status")
    def api_projects_by_status(status: str):
        return jsonify(dump_all(projects.list_by_status(status)))

    # ----- JSON API: progress -----

    def _with_effective(entry) -> dict:
        payload = dump(entry)
        payload["effective_status"] = progress.effective_status(entry).value
        return payload

    @app.route("/api/progress", methods=["GET"], endpoint="api_progress_list")
    def api_progress_list():
        rows = progress.list_filtered(
            project_id=optional_int(request.args.get("projectId"), "projectId"),
            status=request.args.get("status") or None,
        )
        return jsonify([_with_effective(p) for p in rows])

    @app.route("/api/progress/<int:progress_id>", methods=["GET"], endpoint="api_progress_get")
    def api_progress_get(progress_id: int):
        return jsonify(_with_effective(progress.get(progress_id)))

    @app.route("/api/progress", methods=["POST"], endpoint="api_progress_create")
    def api_progress_create():
        return jsonify(_with_effective(progress.create(request_json()))), 201

    @app.route("/api/progress/<int:progress_id>", methods=["PUT"], endpoint="api_progress_update")
    def api_progress_update(progress_id: int):
        return jsonify(_with_effective(progress.update(progress_id, request_json())))

    @app.route("/api/progress/<int:progress_id>", methods=["DELETE"], endpoint="api_progress_delete")
    def api_progress_delete(progress_id: int):
        progress.delete(progress_id)
        return jsonify({"success": True, "message": "Progress entry deleted"})

    @app.route("/api/progress/delayed", endpoint="api_progress_delayed")
    def api_progress_delayed():
        return jsonify([_with_effective(p) for p in progress.list_delayed()])

    @app.route("/api/progress/behind-schedule", endpoint="api_progress_behind")
    def api_progress_behind():
        return jsonify([_with_effective(p) for p in progress.list_behind_schedule()])
