from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .attendance.calculator.standard_calculator import StandardWorkHoursCalculator
from .attendance.json_attendance_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import (
    ATTENDANCE_FILE,
    DEFAULT_MAX_CONTINUOUS_WORK_HOURS,
    DEFAULT_MIN_REST_HOURS,
    DEFAULT_STANDARD_WORK_HOURS,
    PROGRESS_FILE,
    PROJECTS_FILE,
    SAFETY_RECORDS_FILE,
    SCHEDULES_FILE,
    WEATHER_FILE,
    WORKERS_FILE,
)
from .projects.json_project_repository import JsonProgressRepository, JsonProjectRepository
from .projects.service import ProgressService, ProjectService
from .safety.json_safety_repository import JsonSafetyRecordRepository
from .safety.service import SafetyRecordService
from .schedules.json_schedule_repository import JsonScheduleRepository
from .schedules.service import ScheduleService
from .storage.json_store import JsonFileStore
from .weather.json_weather_repository import JsonWeatherInfoRepository
from .weather.service import WeatherService
from .weather.simulator import WeatherSimulator
from .workers.json_worker_repository import JsonWorkerRepository
from .workers.service import WorkerService


@dataclass(frozen=True)
class Container:
    data_dir: Path

    workers_repo: JsonWorkerRepository
    attendance_repo: JsonAttendanceRepository
    schedules_repo: JsonScheduleRepository
    weather_repo: JsonWeatherInfoRepository
    safety_repo: JsonSafetyRecordRepository
    projects_repo: JsonProjectRepository
    progress_repo: JsonProgressRepository

    worker_service: WorkerService
    attendance_service: AttendanceService
    weather_service: WeatherService
    schedule_service: ScheduleService
    safety_service: SafetyRecordService
    project_service: ProjectService
    progress_service: ProgressService


def build_container(
    *,
    data_dir: Path,
    weather_simulation_enabled: bool = True,
    weather_random_seed: Optional[int] = None,
    max_continuous_work_hours: int = DEFAULT_MAX_CONTINUOUS_WORK_HOURS,
    min_rest_hours: int = DEFAULT_MIN_REST_HOURS,
    standard_work_hours: float = DEFAULT_STANDARD_WORK_HOURS,
    store: Optional[JsonFileStore] = None,
) -> Container:
    data_dir = Path(data_dir)
    store = store or JsonFileStore()

    workers_repo = JsonWorkerRepository(data_dir / WORKERS_FILE, store=store)
    attendance_repo = JsonAttendanceRepository(data_dir / ATTENDANCE_FILE, store=store)
    schedules_repo = JsonScheduleRepository(data_dir / SCHEDULES_FILE, store=store)
    weather_repo = JsonWeatherInfoRepository(data_dir / WEATHER_FILE, store=store)
    safety_repo = JsonSafetyRecordRepository(data_dir / SAFETY_RECORDS_FILE, store=store)
    projects_repo = JsonProjectRepository(data_dir / PROJECTS_FILE, store=store)
    progress_repo = JsonProgressRepository(data_dir / PROGRESS_FILE, store=store)

    weather_service = WeatherService(
        weather_repo,
        simulator=WeatherSimulator(random.Random(weather_random_seed)),
        simulation_enabled=weather_simulation_enabled,
    )

    return Container(
        data_dir=data_dir,
        workers_repo=workers_repo,
        attendance_repo=attendance_repo,
        schedules_repo=schedules_repo,
        weather_repo=weather_repo,
        safety_repo=safety_repo,
        projects_repo=projects_repo,
        progress_repo=progress_repo,
        worker_service=WorkerService(workers_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            workers_repo,
            calculator=StandardWorkHoursCalculator(standard_work_hours),
        ),
        weather_service=weather_service,
        schedule_service=ScheduleService(
            schedules_repo,
            weather_service,
            workers_repo,
            projects_repo,
            max_continuous_work_hours=max_continuous_work_hours,
            min_rest_hours=min_rest_hours,
        ),
        safety_service=SafetyRecordService(safety_repo, workers_repo, projects_repo),
        project_service=ProjectService(projects_repo),
        progress_service=ProgressService(progress_repo, projects_repo),
    )
