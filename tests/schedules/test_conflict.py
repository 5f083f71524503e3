from datetime import date, time

from src.highway_workforce.highway_workforce.schedules.conflict import describe_conflicts, find_conflicts, overlaps
from src.highway_workforce.highway_workforce.schedules.model import Schedule

DAY = date(2025, 5, 12)


def shift(start, end, *, id=None, worker_id=1, day=DAY):
    return Schedule(worker_id=worker_id, date=day, start_time=start, end_time=end, id=id)


def test_touching_shifts_do_not_conflict():
    morning = shift(time(8, 0), time(12, 0), id=1)
    afternoon = shift(time(12, 0), time(16, 0))
    assert not overlaps(morning, afternoon)
    assert find_conflicts(afternoon, [morning]) == []


def test_one_minute_overlap_conflicts():
    day_shift = shift(time(8, 0), time(16, 0), id=1)
    late = shift(time(15, 59), time(20, 0))
    assert overlaps(day_shift, late)
    assert find_conflicts(late, [day_shift]) == [day_shift]


def test_other_worker_or_other_day_never_conflicts():
    base = shift(time(8, 0), time(16, 0), id=1)
    assert not overlaps(base, shift(time(9, 0), time(10, 0), worker_id=2))
    assert not overlaps(base, shift(time(9, 0), time(10, 0), day=date(2025, 5, 13)))


def test_candidate_is_not_compared_with_itself():
    existing = shift(time(8, 0), time(16, 0), id=7)
    edited = shift(time(9, 0), time(17, 0), id=7)
    assert find_conflicts(edited, [existing]) == []


def test_midnight_end_covers_late_evening():
    night = shift(time(18, 0), time(0, 0), id=3)
    late = shift(time(23, 0), time(23, 30))
    assert overlaps(night, late)


def test_describe_conflicts_lists_ids_and_ranges():
    conflicts = [shift(time(8, 0), time(12, 0), id=4), shift(time(13, 0), time(15, 0), id=9)]
    text = describe_conflicts(conflicts)
    assert "#4" in text and "08:00-12:00" in text
    assert "#9" in text and "13:00-15:00" in text
    assert describe_conflicts([]) == ""
