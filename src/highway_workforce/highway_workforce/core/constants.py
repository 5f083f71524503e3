"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_STANDARD_WORK_HOURS = 8.0
DEFAULT_MAX_CONTINUOUS_WORK_HOURS = 10
DEFAULT_MIN_REST_HOURS = 8

# Hard limits: beyond these, outdoor work is not suitable.
MAX_SUITABLE_RAINFALL_MM = 5.0
MAX_SUITABLE_WIND_SPEED_MS = 10.0
MIN_SUITABLE_TEMPERATURE_C = 5.0
MAX_SUITABLE_TEMPERATURE_C = 35.0

# Soft limits used for advisory text only.
ADVISORY_RAINFALL_MM = 0.0
ADVISORY_WIND_SPEED_MS = 5.0
ADVISORY_COLD_TEMPERATURE_C = 10.0
ADVISORY_HOT_TEMPERATURE_C = 30.0

WORKERS_FILE = "workers.json"
SCHEDULES_FILE = "schedules.json"
ATTENDANCE_FILE = "attendance.json"
SAFETY_RECORDS_FILE = "safety_records.json"
PROJECTS_FILE = "projects.json"
PROGRESS_FILE = "progress.json"
WEATHER_FILE = "weather_infos.json"
