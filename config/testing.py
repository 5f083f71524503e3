from .config import Config

SECRET_KEY = "test-secret"
DEBUG = False
TESTING = True

DATA_DIR = Config.DATA_DIR
WEATHER_SIMULATION_ENABLED = True
WEATHER_RANDOM_SEED = 42
MAX_CONTINUOUS_WORK_HOURS = 10
MIN_REST_HOURS = 8
STANDARD_WORK_HOURS = 8.0

AUTO_SEED_DATA = False

LOG_LEVEL = "WARNING"
LOG_FILE = None
