from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, timedelta
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import optional_date, optional_time, seconds_of_day
from ..common.pagination import Page, paginate
from ..common.validators import optional_int, optional_text, require_enum, require_positive_id
from ..core.constants import DEFAULT_MAX_CONTINUOUS_WORK_HOURS, DEFAULT_MIN_REST_HOURS
from ..core.enums import ScheduleStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..projects.repository import ProjectRepository
from ..weather.advisory import weather_impact
from ..weather.service import WeatherService
from ..workers.repository import WorkerRepository
from .conflict import describe_conflicts, find_conflicts
from .model import Schedule
from .repository import ScheduleRepository

log = logging.getLogger(__name__)


class ScheduleService:
    """Use case: shift scheduling.

    Every create/update recomputes the conflict flag against the worker's
    other shifts that day and copies the weather for (location, date) onto
    the record. Check-then-save is not atomic across requests.
    """

    def __init__(
        self,
        schedules: ScheduleRepository,
        weather: WeatherService,
        workers: WorkerRepository,
        projects: Optional[ProjectRepository] = None,
        *,
        max_continuous_work_hours: int = DEFAULT_MAX_CONTINUOUS_WORK_HOURS,
        min_rest_hours: int = DEFAULT_MIN_REST_HOURS,
    ):
        self._schedules = schedules
        self._weather = weather
        self._workers = workers
        self._projects = projects
        self._max_continuous_work_hours = int(max_continuous_work_hours)
        self._min_rest_hours = int(min_rest_hours)

    def _build(self, data: Mapping[str, Any], *, schedule_id: Optional[int] = None) -> Schedule:
        worker_id = require_positive_id(data.get("worker_id"), "Worker")
        if not self._workers.get_by_id(worker_id):
            raise ValidationError(f"Worker {worker_id} does not exist")

        project_id = optional_int(data.get("project_id"), "Project")
        if project_id and self._projects and not self._projects.get_by_id(project_id):
            raise ValidationError(f"Project {project_id} does not exist")

        day = optional_date(data.get("date"), "date")
        start = optional_time(data.get("start_time"), "start time")
        end = optional_time(data.get("end_time"), "end time")
        if day is None or start is None or end is None:
            raise ValidationError("Date, start time and end time are required")
        if seconds_of_day(end, is_end=True) <= seconds_of_day(start):
            raise ValidationError("End time must be after start time")

        return Schedule(
            id=schedule_id,
            worker_id=worker_id,
            project_id=project_id or None,
            date=day,
            start_time=start,
            end_time=end,
            shift_type=optional_text(data.get("shift_type")),
            location=optional_text(data.get("location")),
            status=require_enum(data.get("status"), ScheduleStatus, "Status", default=ScheduleStatus.PENDING),
            remarks=optional_text(data.get("remarks")),
        )

    def _with_conflicts(self, schedule: Schedule) -> Schedule:
        same_day = self._schedules.find_by_worker(schedule.worker_id, start=schedule.date, end=schedule.date)
        conflicts = find_conflicts(schedule, same_day)
        if conflicts:
            log.warning("Schedule for worker %s on %s conflicts with %s", schedule.worker_id, schedule.date, [c.id for c in conflicts])
        return replace(schedule, has_conflict=bool(conflicts), conflict_description=describe_conflicts(conflicts) or None)

    def apply_weather(self, schedule: Schedule) -> Schedule:
        """Copy weather for the schedule's (location, date) onto it."""
        if not schedule.location:
            return schedule
        try:
            info = self._weather.get_weather_info(schedule.location, schedule.date)
        except NotFoundError as e:
            log.info("No weather for schedule at %s on %s: %s", schedule.location, schedule.date, e)
            return schedule

        return replace(
            schedule,
            weather_condition=info.weather_condition,
            temperature=info.temperature,
            rainfall=info.rainfall,
            wind_speed=info.wind_speed,
            weather_alert=info.weather_alert,
            suitable_for_work=info.suitable_for_work,
            weather_impact=weather_impact(info),
        )

    def create(self, data: Mapping[str, Any]) -> Schedule:
        schedule = self.apply_weather(self._with_conflicts(self._build(data)))
        saved = self._schedules.save(schedule)
        log.info("Created schedule %s for worker %s on %s", saved.id, saved.worker_id, saved.date)
        return saved

    def update(self, schedule_id: int, data: Mapping[str, Any]) -> Schedule:
        self.get(schedule_id)
        schedule = self._build(data, schedule_id=int(schedule_id))
        return self._schedules.save(self.apply_weather(self._with_conflicts(schedule)))

    def save(self, data: Mapping[str, Any], *, schedule_id: Optional[int] = None) -> Schedule:
        if schedule_id:
            return self.update(schedule_id, data)
        return self.create(data)

    def get(self, schedule_id: int) -> Schedule:
        schedule = self._schedules.get_by_id(schedule_id)
        if not schedule:
            raise NotFoundError(f"Schedule {schedule_id} not found")
        return schedule

    def delete(self, schedule_id: int) -> None:
        if not self._schedules.delete(schedule_id):
            raise NotFoundError(f"Schedule {schedule_id} not found")

    def delete_many(self, schedule_ids: Iterable[int]) -> int:
        return self._schedules.delete_many([int(i) for i in schedule_ids])

    def list_filtered(
        self,
        *,
        worker_id: Optional[int] = None,
        project_id: Optional[int] = None,
        day: Optional[date] = None,
        location: Optional[str] = None,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> list[Schedule]:
        if day is not None:
            start = end = day

        if worker_id is not None:
            rows = self._schedules.find_by_worker(worker_id, start=start, end=end)
        elif project_id is not None:
            rows = self._schedules.find_by_project(project_id, start=start, end=end)
        else:
            rows = [
                s
                for s in self._schedules.list_all()
                if (start is None or s.date >= start) and (end is None or s.date <= end)
            ]

        if project_id is not None:
            rows = [s for s in rows if s.project_id == project_id]
        if location:
            rows = [s for s in rows if s.location == location]
        return sorted(rows, key=lambda s: (s.date, s.start_time, s.id))

    def list_page(self, *, page: int, size: int, **filters) -> Page[Schedule]:
        return paginate(self.list_filtered(**filters), page=page, size=size, key=lambda s: (s.date, s.start_time, s.id))

    def check_conflict(self, schedule_id: int) -> bool:
        return bool(self.get_conflicting_schedules(schedule_id))

    def get_conflicting_schedules(self, schedule_id: int) -> list[Schedule]:
        schedule = self.get(schedule_id)
        same_day = self._schedules.find_by_worker(schedule.worker_id, start=schedule.date, end=schedule.date)
        return find_conflicts(schedule, same_day)

    def refresh_weather(self, schedule_id: int) -> Schedule:
        return self._schedules.save(self.apply_weather(self.get(schedule_id)))

    def refresh_weather_for(self, day: date, location: str) -> list[Schedule]:
        """Re-apply weather to every schedule at ``location`` on ``day``."""
        return [self._schedules.save(self.apply_weather(s)) for s in self._schedules.find_by_date_and_location(day, location)]

    def schedule_suggestion(self, day: date, location: str) -> str:
        info = self._weather.get_weather_info(location, day)
        if not info.suitable_for_work:
            return f"Construction not recommended: {info.work_suggestion}"
        return f"Construction can proceed: {info.work_suggestion}"

    def work_hour_warnings(self, schedule_id: int) -> list[str]:
        """Shift length and rest-time checks against the configured limits."""
        schedule = self.get(schedule_id)
        warnings = []

        start = seconds_of_day(schedule.start_time)
        end = seconds_of_day(schedule.end_time, is_end=True)
        work_hours = (end - start) / 3600
        if work_hours > self._max_continuous_work_hours:
            warnings.append(
                f"Shift lasts {work_hours:.1f}h, more than the {self._max_continuous_work_hours}h continuous limit"
            )

        previous_day = schedule.date - timedelta(days=1)
        previous = self._schedules.find_by_worker(schedule.worker_id, start=previous_day, end=previous_day)
        if previous:
            last_end = max(seconds_of_day(s.end_time, is_end=True) for s in previous)
            rest_hours = (24 * 3600 - last_end + start) / 3600
            if rest_hours < self._min_rest_hours:
                warnings.append(f"Only {rest_hours:.1f}h rest since the previous shift, minimum is {self._min_rest_hours}h")

        return warnings
