"""Small helpers shared by the Flask controllers."""

from __future__ import annotations

from typing import Any, Iterable

from flask import jsonify, request

from ..core.exceptions import ValidationError
from ..storage.serialization import to_record
from .pagination import Page


def wants_json() -> bool:
    """JSON API routes live under ``/api/`` (or ``/<module>/api/``)."""
    return request.path.startswith("/api/") or "/api/" in request.path


def dump(entity: Any) -> dict:
    return to_record(entity)


def dump_all(entities: Iterable[Any]) -> list[dict]:
    return [to_record(e) for e in entities]


def page_payload(page: Page, name: str) -> dict:
    return {
        name: dump_all(page.items),
        "page": page.page,
        "size": page.size,
        "total_items": page.total_items,
        "total_pages": page.total_pages,
    }


def json_error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def request_json() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def request_id_list() -> list[int]:
    data = request.get_json(silent=True)
    if not isinstance(data, list):
        raise ValidationError("Request body must be a JSON array of ids")
    try:
        return [int(i) for i in data]
    except (TypeError, ValueError):
        raise ValidationError("Ids must be integers")
