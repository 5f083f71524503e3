from __future__ import annotations

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.http import dump, dump_all, page_payload, request_id_list, request_json
from ..common.pagination import page_params
from ..core.enums import WorkerStatus
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.worker_service

    # ----- server-rendered pages -----

    @app.route("/workers", endpoint="workers_list")
    def workers_list():
        page, size = page_params(request.args)
        name = request.args.get("name") or None
        position = request.args.get("position") or None
        status = request.args.get("status") or None

        result = service.list_page(page=page, size=size, name=name, position=position, status=status)
        return render_template(
            "workers/list.html",
            result=result,
            name=name or "",
            position=position or "",
            status=status or "",
            statuses=list(WorkerStatus),
            active_page="workers",
        )

    @app.route("/workers/add", endpoint="workers_add")
    def workers_add():
        return render_template("workers/form.html", worker=None, statuses=list(WorkerStatus), active_page="workers")

    @app.route("/workers/edit/<int:worker_id>", endpoint="workers_edit")
    def workers_edit(worker_id: int):
        worker = service.get(worker_id)
        return render_template("workers/form.html", worker=worker, statuses=list(WorkerStatus), active_page="workers")

    @app.route("/workers/save", methods=["POST"], endpoint="workers_save")
    def workers_save():
        worker_id = request.form.get("id", type=int)
        try:
            service.save(request.form.to_dict(), worker_id=worker_id)
            flash("Worker saved.", "success")
            return redirect(url_for("workers_list"))
        except ValidationError as e:
            flash(str(e), "danger")
            if worker_id:
                return redirect(url_for("workers_edit", worker_id=worker_id))
            return redirect(url_for("workers_add"))

    @app.route("/workers/view/<int:worker_id>", endpoint="workers_view")
    def workers_view(worker_id: int):
        worker = service.get(worker_id)
        return render_template("workers/view.html", worker=worker, active_page="workers")

    @app.route("/workers/delete/<int:worker_id>", methods=["GET", "POST"], endpoint="workers_delete")
    def workers_delete(worker_id: int):
        service.delete(worker_id)
        flash("Worker deleted.", "success")
        return redirect(url_for("workers_list"))

    @app.route("/workers/delete-batch", methods=["POST"], endpoint="workers_delete_batch")
    def workers_delete_batch():
        ids = [int(i) for i in request.form.getlist("ids") if i.isdigit()]
        removed = service.delete_many(ids)
        flash(f"Deleted {removed} workers.", "success")
        return redirect(url_for("workers_list"))

    # ----- JSON API -----

    @app.route("/api/workers", methods=["GET"], endpoint="api_workers_list")
    def api_workers_list():
        page, size = page_params(request.args)
        result = service.list_page(
            page=page,
            size=size,
            name=request.args.get("name") or None,
            position=request.args.get("position") or None,
            status=request.args.get("status") or None,
        )
        return jsonify(page_payload(result, "workers"))

    @app.route("/api/workers/<int:worker_id>", methods=["GET"], endpoint="api_workers_get")
    def api_workers_get(worker_id: int):
        return jsonify(dump(service.get(worker_id)))

    @app.route("/api/workers", methods=["POST"], endpoint="api_workers_create")
    def api_workers_create():
        worker = service.create(request_json())
        return jsonify(dump(worker)), 201

    @app.route("/api/workers/<int:worker_id>", methods=["PUT"], endpoint="api_workers_update")
    def api_workers_update(worker_id: int):
        return jsonify(dump(service.update(worker_id, request_json())))

    @app.route("/api/workers/<int:worker_id>", methods=["DELETE"], endpoint="api_workers_delete")
    def api_workers_delete(worker_id: int):
        service.delete(worker_id)
        return jsonify({"success": True, "message": "Worker deleted"})

    @app.route("/api/workers", methods=["DELETE"], endpoint="api_workers_delete_batch")
    def api_workers_delete_batch():
        removed = service.delete_many(request_id_list())
        return jsonify({"success": True, "message": f"Deleted {removed} workers", "deleted": removed})

    @app.route("/api/workers/position/<position>", endpoint="api_workers_by_position")
    def api_workers_by_position(position: str):
        return jsonify(dump_all(service.list_by_position(position)))

    @app.route("/api/workers/status/<status>", endpoint="api_workers_by_status")
    def api_workers_by_status(status: str):
        return jsonify(dump_all(service.list_by_status(status)))

    @app.route("/api/workers/id-card/<id_card>", endpoint="api_workers_by_id_card")
    def api_workers_by_id_card(id_card: str):
        return jsonify(dump(service.get_by_id_card(id_card)))

    @app.route("/api/workers/statistics", endpoint="api_workers_statistics")
    def api_workers_statistics():
        return jsonify(service.statistics())
