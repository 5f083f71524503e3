import os

from .config import Config, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")
DEBUG = False

DATA_DIR = Config.DATA_DIR
WEATHER_SIMULATION_ENABLED = Config.WEATHER_SIMULATION_ENABLED
WEATHER_RANDOM_SEED = Config.WEATHER_RANDOM_SEED
MAX_CONTINUOUS_WORK_HOURS = Config.MAX_CONTINUOUS_WORK_HOURS
MIN_REST_HOURS = Config.MIN_REST_HOURS
STANDARD_WORK_HOURS = Config.STANDARD_WORK_HOURS

AUTO_SEED_DATA = env_bool("AUTO_SEED_DATA", False)

LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = Config.LOG_FILE
