"""Dataclass <-> JSON-ready dict conversion.

Dates, times and datetimes are written in ISO-8601, enums by value.
Reading coerces each field back using the dataclass type hints, so the
JSON files stay plain arrays of objects.
"""

from __future__ import annotations

import dataclasses
import typing
from datetime import date, datetime, time
from enum import Enum
from typing import Any, Dict, Type, TypeVar

T = TypeVar("T")

_NONE_TYPE = type(None)


def to_record(entity: Any) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    for f in dataclasses.fields(entity):
        out[f.name] = _dump_value(getattr(entity, f.name))
    return out


def from_record(entity_cls: Type[T], data: Dict[str, Any]) -> T:
    hints = typing.get_type_hints(entity_cls)
    kwargs: Dict[str, Any] = {}
    for f in dataclasses.fields(entity_cls):
        if f.name not in data:
            continue
        kwargs[f.name] = _load_value(hints[f.name], data[f.name])
    return entity_cls(**kwargs)


def _dump_value(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return value


def _unwrap_optional(hint: Any) -> Any:
    if typing.get_origin(hint) is typing.Union:
        args = [a for a in typing.get_args(hint) if a is not _NONE_TYPE]
        if len(args) == 1:
            return args[0]
    return hint


def _load_value(hint: Any, raw: Any) -> Any:
    if raw is None:
        return None

    target = _unwrap_optional(hint)
    if not isinstance(target, type):
        return raw

    if issubclass(target, Enum):
        return target(raw)
    if target is datetime:
        return datetime.fromisoformat(raw)
    if target is date:
        return date.fromisoformat(raw)
    if target is time:
        return time.fromisoformat(raw)
    if target is bool:
        if not isinstance(raw, bool):
            raise ValueError(f"Expected a JSON boolean, got {raw!r}")
        return raw
    if target is int:
        return int(raw)
    if target is float:
        return float(raw)
    if target is str:
        return str(raw)
    return raw
