from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import optional_date, today_local
from ..common.http import dump, dump_all, request_json
from ..common.validators import require_non_empty
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.weather_service

    @app.route("/api/weather", methods=["GET"], endpoint="api_weather_get")
    def api_weather_get():
        location = require_non_empty(request.args.get("location"), "Location")
        day = optional_date(request.args.get("date"), "date") or today_local()
        return jsonify(dump(service.get_weather_info(location, day)))

    @app.route("/api/weather/update", methods=["POST"], endpoint="api_weather_update")
    def api_weather_update():
        location = require_non_empty(request.args.get("location"), "Location")
        return jsonify(dump(service.update_weather_info(location)))

    @app.route("/api/weather/check", methods=["POST"], endpoint="api_weather_check")
    def api_weather_check():
        return jsonify({"suitable_for_work": service.check_suitability(request_json())})

    @app.route("/api/weather/suggestion", methods=["POST"], endpoint="api_weather_suggestion")
    def api_weather_suggestion():
        return jsonify({"work_suggestion": service.suggestion(request_json())})

    @app.route("/api/weather/observations", methods=["POST"], endpoint="api_weather_observe")
    def api_weather_observe():
        return jsonify(dump(service.record_observation(request_json()))), 201

    @app.route("/api/weather/range", methods=["GET"], endpoint="api_weather_range")
    def api_weather_range():
        location = require_non_empty(request.args.get("location"), "Location")
        start = optional_date(request.args.get("startDate"), "start date") or today_local()
        end = optional_date(request.args.get("endDate"), "end date") or start
        return jsonify(dump_all(service.list_for_location(location, start, end)))
