"""Shift overlap detection.

Shifts are half-open ``[start, end)`` intervals, so a shift ending at 16:00
does not clash with one starting at 16:00. An end time of 00:00 means
midnight at the end of the day.
"""

from __future__ import annotations

from typing import Iterable

from ..common.datetime_utils import seconds_of_day
from .model import Schedule


def _interval(s: Schedule) -> tuple[int, int]:
    return seconds_of_day(s.start_time), seconds_of_day(s.end_time, is_end=True)


def overlaps(a: Schedule, b: Schedule) -> bool:
    if a.worker_id != b.worker_id or a.date != b.date:
        return False

    a_start, a_end = _interval(a)
    b_start, b_end = _interval(b)
    return not (a_end <= b_start or a_start >= b_end)


def find_conflicts(candidate: Schedule, others: Iterable[Schedule]) -> list[Schedule]:
    out = []
    for other in others:
        if candidate.id is not None and other.id == candidate.id:
            continue
        if overlaps(candidate, other):
            out.append(other)
    return sorted(out, key=lambda s: (s.start_time, s.id or 0))


def _fmt(s: Schedule) -> str:
    end = "24:00" if seconds_of_day(s.end_time, is_end=True) == 24 * 3600 else s.end_time.strftime("%H:%M")
    return f"#{s.id} ({s.start_time.strftime('%H:%M')}-{end})"


def describe_conflicts(conflicts: Iterable[Schedule]) -> str:
    conflicts = list(conflicts)
    if not conflicts:
        return ""
    return "Overlaps with shift " + ", ".join(_fmt(s) for s in conflicts)
