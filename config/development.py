from .config import Config, env_bool

SECRET_KEY = Config.SECRET_KEY
DEBUG = True

DATA_DIR = Config.DATA_DIR
WEATHER_SIMULATION_ENABLED = Config.WEATHER_SIMULATION_ENABLED
WEATHER_RANDOM_SEED = Config.WEATHER_RANDOM_SEED
MAX_CONTINUOUS_WORK_HOURS = Config.MAX_CONTINUOUS_WORK_HOURS
MIN_REST_HOURS = Config.MIN_REST_HOURS
STANDARD_WORK_HOURS = Config.STANDARD_WORK_HOURS

# Seed demo data into an empty data directory on startup
AUTO_SEED_DATA = env_bool("AUTO_SEED_DATA", True)

LOG_LEVEL = "DEBUG"
LOG_FILE = Config.LOG_FILE
