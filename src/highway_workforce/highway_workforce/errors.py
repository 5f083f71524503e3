"""Application-wide error handlers.

API paths get ``{"success": false, "message": ...}`` JSON, pages get an
error template.
"""

from __future__ import annotations

import logging

from flask import Flask, render_template
from werkzeug.exceptions import HTTPException

from .common.http import json_error, wants_json
from .core.exceptions import NotFoundError, ValidationError

log = logging.getLogger(__name__)


def _respond(message: str, status: int, template: str):
    if wants_json():
        return json_error(message, status)
    return render_template(template, message=message, status=status), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def handle_validation_error(e: ValidationError):
        return _respond(str(e), 400, "errors/400.html")

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _respond(str(e), 404, "errors/404.html")

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        if e.code == 404:
            return _respond("Page not found", 404, "errors/404.html")
        if wants_json():
            return json_error(e.description or e.name, e.code or 500)
        return e

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        log.exception("Unhandled error")
        return _respond("Internal server error", 500, "errors/500.html")
