from __future__ import annotations

from typing import Optional, Type, TypeVar

from ..core.exceptions import ValidationError

E = TypeVar("E")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    value = "" if value is None else str(value).strip()
    if not value:
        raise ValidationError(f"{field_name} is required")
    return value


def optional_text(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def require_positive_id(value, field_name: str) -> int:
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} is invalid")
    if parsed <= 0:
        raise ValidationError(f"{field_name} is invalid")
    return parsed


def optional_int(value, field_name: str) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def optional_float(value, field_name: str) -> Optional[float]:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")


def require_percent(value, field_name: str) -> int:
    parsed = optional_int(value, field_name)
    if parsed is None:
        return 0
    if parsed < 0 or parsed > 100:
        raise ValidationError(f"{field_name} must be between 0 and 100")
    return parsed


def require_enum(value, enum_cls: Type[E], field_name: str, *, default: Optional[E] = None) -> E:
    if value is None or value == "":
        if default is None:
            raise ValidationError(f"{field_name} is required")
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"{field_name} is invalid: {value}")
