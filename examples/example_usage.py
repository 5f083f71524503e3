"""Example: drive the service layer directly, without Flask.

Controllers stay thin; the rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.highway_workforce.highway_workforce.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_dir=settings.DATA_DIR, weather_random_seed=7)

    info = container.weather_service.get_weather_info("Section 3", date.today())
    print(info.weather_condition.value, info.temperature, info.work_suggestion)
    print(container.schedule_service.schedule_suggestion(date.today(), "Section 3"))


if __name__ == "__main__":
    main()
