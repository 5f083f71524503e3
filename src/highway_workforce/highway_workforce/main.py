from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import click
from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module
from config.logging_setup import configure_logging

from .attendance.controller import register as register_attendance
from .container import build_container
from .errors import register_error_handlers
from .home.controller import register as register_home
from .projects.controller import register as register_projects
from .safety.controller import register as register_safety
from .schedules.controller import register as register_schedules
from .storage.seed import seed_demo_data
from .weather.controller import register as register_weather
from .workers.controller import register as register_workers

log = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "TESTING",
    "DATA_DIR",
    "WEATHER_SIMULATION_ENABLED",
    "WEATHER_RANDOM_SEED",
    "MAX_CONTINUOUS_WORK_HOURS",
    "MIN_REST_HOURS",
    "STANDARD_WORK_HOURS",
    "AUTO_SEED_DATA",
    "LOG_LEVEL",
    "LOG_FILE",
)


def create_app(overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__, template_folder="../../../templates")

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        app.config[name] = getattr(settings, name, app.config.get(name))
    if overrides:
        app.config.update(overrides)
    app.secret_key = app.config["SECRET_KEY"]

    configure_logging(__package__, app.config.get("LOG_LEVEL") or "INFO", app.config.get("LOG_FILE"))

    data_dir = Path(app.config["DATA_DIR"])
    log.info("Starting with settings=%s data_dir=%s", settings_module, data_dir.resolve())

    container = build_container(
        data_dir=data_dir,
        weather_simulation_enabled=bool(app.config.get("WEATHER_SIMULATION_ENABLED", True)),
        weather_random_seed=app.config.get("WEATHER_RANDOM_SEED"),
        max_continuous_work_hours=int(app.config.get("MAX_CONTINUOUS_WORK_HOURS") or 10),
        min_rest_hours=int(app.config.get("MIN_REST_HOURS") or 8),
        standard_work_hours=float(app.config.get("STANDARD_WORK_HOURS") or 8),
    )
    app.extensions["highway_workforce"] = container

    if app.config.get("AUTO_SEED_DATA"):
        seed_demo_data(container)

    @app.cli.command("seed-data")
    def seed_data_command():
        """Seed demo data into an empty data directory."""
        if seed_demo_data(container):
            click.echo(f"Demo data written to {data_dir}")
        else:
            click.echo("Data directory already has workers; nothing seeded")

    register_error_handlers(app)
    register_home(app, container)
    register_workers(app, container)
    register_attendance(app, container)
    register_schedules(app, container)
    register_weather(app, container)
    register_safety(app, container)
    register_projects(app, container)

    return app
