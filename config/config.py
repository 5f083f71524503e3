import os


def env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def env_int(name: str, default):
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    return int(raw)


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "highway-workforce-secret"

    # JSON data files live here
    DATA_DIR = os.environ.get("DATA_DIR", "data")

    # Weather
    WEATHER_SIMULATION_ENABLED = env_bool("WEATHER_SIMULATION_ENABLED", True)
    WEATHER_RANDOM_SEED = env_int("WEATHER_RANDOM_SEED", None)

    # Working-time rules
    MAX_CONTINUOUS_WORK_HOURS = env_int("MAX_CONTINUOUS_WORK_HOURS", 10)
    MIN_REST_HOURS = env_int("MIN_REST_HOURS", 8)
    STANDARD_WORK_HOURS = float(os.environ.get("STANDARD_WORK_HOURS", "8"))

    # Logging
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None
