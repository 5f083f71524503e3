from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_time(value: str) -> time:
    """Parse HH:MM or HH:MM:SS into time.

    ``24:00`` is accepted as an end-of-day marker and returned as ``00:00``.
    Times with a UTC offset are rejected; all times are site-local.
    """
    value = value.strip()
    if value in {"24:00", "24:00:00"}:
        return time(0, 0)
    parsed = time.fromisoformat(value)
    if parsed.tzinfo is not None:
        raise ValueError(f"UTC offset not allowed: {value}")
    return parsed


def parse_iso_datetime(value: str) -> datetime:
    """Parse ``YYYY-MM-DDTHH:MM[:SS]`` (a space is accepted instead of ``T``).

    Offsets such as ``+07:00`` or ``Z`` are rejected, stored datetimes are naive.
    """
    parsed = datetime.fromisoformat(value.strip().replace(" ", "T"))
    if parsed.tzinfo is not None:
        raise ValueError(f"UTC offset not allowed: {value}")
    return parsed


def optional_date(value: Optional[str], field_name: str) -> Optional[date]:
    if not value:
        return None
    try:
        return parse_iso_date(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}: {value}")


def optional_time(value: Optional[str], field_name: str) -> Optional[time]:
    if not value:
        return None
    try:
        return parse_iso_time(value)
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"Invalid {field_name}: {value}")


def optional_datetime(value: Optional[str], field_name: str) -> Optional[datetime]:
    if not value:
        return None
    try:
        return parse_iso_datetime(value)
    except (TypeError, ValueError, AttributeError):
        raise ValidationError(f"Invalid {field_name}: {value}")


def seconds_of_day(value: time, *, is_end: bool = False) -> int:
    """Seconds since midnight; an end time of 00:00 counts as 24:00."""
    seconds = value.hour * 3600 + value.minute * 60 + value.second
    if is_end and seconds == 0:
        return 24 * 3600
    return seconds


def hours_between(start: datetime, end: datetime) -> float:
    """Elapsed hours rounded to one decimal."""
    minutes = int((end - start).total_seconds() // 60)
    return round(minutes / 60.0, 1)


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()
