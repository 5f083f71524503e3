from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dotenv import load_dotenv

from config import get_settings_module
from config.logging_setup import configure_logging

from src.highway_workforce.highway_workforce.container import build_container
from src.highway_workforce.highway_workforce.storage.seed import seed_demo_data


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging("src.highway_workforce.highway_workforce", settings.LOG_LEVEL, settings.LOG_FILE)

    data_dir = Path(settings.DATA_DIR)
    container = build_container(
        data_dir=data_dir,
        weather_simulation_enabled=settings.WEATHER_SIMULATION_ENABLED,
        weather_random_seed=settings.WEATHER_RANDOM_SEED,
        max_continuous_work_hours=settings.MAX_CONTINUOUS_WORK_HOURS,
        min_rest_hours=settings.MIN_REST_HOURS,
        standard_work_hours=settings.STANDARD_WORK_HOURS,
    )
    if seed_demo_data(container):
        print(f"OK: Seeded demo data -> {data_dir.resolve()}")
    else:
        print(f"SKIP: {data_dir.resolve()} already has workers")


if __name__ == "__main__":
    main()
