"""
Tests for compute_layout - end-to-end overlap layout for the calendar views
"""
import random

import pytest
from datetime import date, datetime, timedelta

from planner.config import Settings
from planner.domain.errors import ValidationError
from planner.domain.layout_item import CalendarEventItem, TaskItem
from planner.application.layout import (
    compute_layout, compute_day_layout, compute_week_layout, select_items_for_day,
)


TODAY = date(2026, 3, 16)  # Monday
TOMORROW = TODAY + timedelta(days=1)


def _at(hh, mm, day=TODAY):
    return datetime(day.year, day.month, day.day, hh, mm)


def _event(id, start, end, day=TODAY, all_day=False):
    """start/end as (hh, mm) tuples"""
    return CalendarEventItem(id=id, start_time=_at(*start, day), end_time=_at(*end, day), all_day=all_day)


def _task(id, scheduled_time, duration=None, day=TODAY, all_day=False):
    return TaskItem(
        id=id, scheduled_time=scheduled_time, duration=duration,
        all_day=all_day, scheduled_date=day,
    )


def _by_id(positioned):
    return {p.id: p for p in positioned}


def _brute_force_peak(items):
    """Max number of items covering any single minute."""
    return max(
        sum(1 for p in items if p.start_minutes <= minute < p.end_minutes)
        for minute in range(1440)
    )


def _random_day(seed, n_events=12, n_tasks=8):
    rng = random.Random(seed)
    events, tasks = [], []
    for n in range(n_events):
        start = rng.randrange(6 * 60, 20 * 60)
        end = start + rng.choice([15, 30, 45, 60, 90, 120])
        events.append(CalendarEventItem(
            id=f"e{n}", start_time=_at(start // 60, start % 60),
            end_time=_at(end // 60, end % 60),
        ))
    for n in range(n_tasks):
        start = rng.randrange(6 * 60, 20 * 60)
        tasks.append(_task(f"t{n}", f"{start // 60:02d}:{start % 60:02d}", rng.choice([None, 15, 30, 60])))
    return events, tasks


# ======================================================================
# Scenarios
# ======================================================================

class TestScenarios:
    def test_empty(self, settings):
        assert compute_layout([], [], settings) == []

    def test_single_event_full_width(self, settings):
        [p] = compute_layout([_event("a", (9, 0), (10, 0))], [], settings)
        assert (p.column_index, p.total_columns, p.left, p.width) == (0, 1, 0.0, 100.0)

    def test_three_overlapping_events(self, settings):
        """A 09-11, B 10-12, C 09-10 → two columns, C shares B's column."""
        events = [
            _event("A", (9, 0), (11, 0)),
            _event("B", (10, 0), (12, 0)),
            _event("C", (9, 0), (10, 0)),
        ]
        result = _by_id(compute_layout(events, [], settings))
        assert {p.total_columns for p in result.values()} == {2}
        assert result["A"].column_index != result["B"].column_index
        assert result["C"].column_index == result["B"].column_index
        assert (result["A"].left, result["A"].width) == (0.0, 50.0)
        assert (result["B"].left, result["B"].width) == (50.0, 50.0)

    def test_disjoint_sets(self, settings):
        events = [_event("am", (9, 0), (10, 0)), _event("pm", (13, 0), (14, 0))]
        for p in compute_layout(events, [], settings):
            assert (p.total_columns, p.left, p.width) == (1, 0.0, 100.0)

    def test_task_without_scheduled_time_excluded(self, settings):
        tasks = [_task("floating", None), _task("timed", "10:00")]
        result = compute_layout([], tasks, settings)
        assert [p.id for p in result] == ["timed"]

    def test_adjacent_items_share_column(self, settings):
        """Ends at minute 600, next starts at 600: both full width, no conflict."""
        result = _by_id(compute_layout(
            [_event("first", (9, 0), (10, 0))], [_task("second", "10:00", 30)], settings,
        ))
        assert result["first"].end_minutes == result["second"].start_minutes == 600
        assert result["first"].total_columns == result["second"].total_columns == 1
        assert result["first"].column_index == result["second"].column_index == 0

    def test_events_and_tasks_mixed(self, settings):
        events = [_event("meeting", (14, 0), (15, 0))]
        tasks = [_task("review", "14:30", 60)]
        result = _by_id(compute_layout(events, tasks, settings))
        assert result["meeting"].kind == "event"
        assert result["review"].kind == "task"
        assert result["meeting"].total_columns == 2
        assert result["review"].left == 50.0

    def test_three_columns_thirds(self, settings):
        events = [_event(x, (9, 0), (10, 0)) for x in "abc"]
        result = compute_layout(events, [], settings)
        assert [p.column_index for p in result] == [0, 1, 2]
        assert [p.left for p in result] == [0 * (100 / 3), 1 * (100 / 3), 2 * (100 / 3)]
        assert all(p.width == 100 / 3 for p in result)

    def test_all_day_items_excluded(self, settings):
        events = [_event("holiday", (0, 0), (23, 59), all_day=True)]
        tasks = [_task("all-day-task", "09:00", all_day=True)]
        assert compute_layout(events, tasks, settings) == []

    def test_payload_preserved(self, settings):
        ev = _event("a", (9, 0), (10, 0))
        [p] = compute_layout([ev], [], settings)
        assert p.payload is ev

    def test_default_task_duration_from_settings(self):
        settings = Settings(_env_file=None, LAYOUT_DEFAULT_TASK_DURATION=45)
        [p] = compute_layout([], [_task("t", "09:00")], settings)
        assert p.end_minutes == 585

    def test_malformed_time_propagates(self, settings):
        with pytest.raises(ValidationError, match="broken"):
            compute_layout([], [_task("broken", "9h30")], settings)

    def test_strict_mode_passes_on_valid_input(self, strict_settings):
        events, tasks = _random_day(7)
        assert len(compute_layout(events, tasks, strict_settings)) == len(events) + len(tasks)


# ======================================================================
# Properties over random days
# ======================================================================

@pytest.mark.parametrize("seed", range(10))
class TestLayoutProperties:
    def test_partition(self, seed, settings):
        events, tasks = _random_day(seed)
        tasks.append(_task("unscheduled", None))
        events.append(_event("allday", (0, 0), (23, 0), all_day=True))
        result = compute_layout(events, tasks, settings)
        ids = [p.id for p in result]
        assert len(ids) == len(set(ids))
        assert set(ids) == {e.id for e in events if not e.all_day} | {t.id for t in tasks if t.scheduled_time}

    def test_no_column_overlap(self, seed, settings):
        events, tasks = _random_day(seed)
        result = compute_layout(events, tasks, settings)
        for i, a in enumerate(result):
            for b in result[i + 1:]:
                same_column = a.column_index == b.column_index
                if same_column and a.start_minutes < b.end_minutes and b.start_minutes < a.end_minutes:
                    pytest.fail(f"{a.id} and {b.id} overlap in column {a.column_index}")

    def test_total_columns_matches_brute_force(self, seed, settings):
        events, tasks = _random_day(seed)
        result = compute_layout(events, tasks, settings)

        # rebuild clusters as connected components from the output itself
        remaining = list(result)
        while remaining:
            component = [remaining.pop(0)]
            grew = True
            while grew:
                grew = False
                for p in list(remaining):
                    if any(p.start_minutes < q.end_minutes and q.start_minutes < p.end_minutes for q in component):
                        component.append(p)
                        remaining.remove(p)
                        grew = True
            expected = _brute_force_peak(component)
            assert {p.total_columns for p in component} == {expected}

    def test_positions_within_bounds(self, seed, settings):
        events, tasks = _random_day(seed)
        for p in compute_layout(events, tasks, settings):
            assert 0 <= p.column_index < p.total_columns
            assert 0 <= p.left < 100
            assert p.left + p.width <= 100 + 1e-9

    def test_deterministic(self, seed, settings):
        events, tasks = _random_day(seed)
        first = compute_layout(events, tasks, settings)
        second = compute_layout(list(reversed(events)), list(reversed(tasks)), settings)
        assert repr(first) == repr(second)
        assert first == second


# ======================================================================
# Day / week selection
# ======================================================================

class TestDayLayout:
    def test_select_items_for_day(self):
        events = [_event("today", (9, 0), (10, 0)), _event("tomorrow", (9, 0), (10, 0), day=TOMORROW)]
        tasks = [_task("t-today", "09:00"), _task("t-tomorrow", "09:00", day=TOMORROW), _task("undated", "09:00", day=None)]
        day_events, day_tasks = select_items_for_day(events, tasks, TODAY)
        assert [e.id for e in day_events] == ["today"]
        assert [t.id for t in day_tasks] == ["t-today"]

    def test_other_days_do_not_affect_columns(self, settings):
        events = [_event("a", (9, 0), (10, 0)), _event("b", (9, 0), (10, 0), day=TOMORROW)]
        [p] = compute_day_layout(events, [], TODAY, settings)
        assert (p.id, p.total_columns) == ("a", 1)

    def test_week_layout_has_seven_days(self, settings):
        events = [
            _event("mon-1", (9, 0), (10, 0)),
            _event("mon-2", (9, 30), (10, 30)),
            _event("tue", (9, 0), (10, 0), day=TOMORROW),
        ]
        tasks = [_task("sun", "12:00", day=TODAY + timedelta(days=6))]
        week = compute_week_layout(events, tasks, TODAY, settings)

        assert list(week) == [TODAY + timedelta(days=n) for n in range(7)]
        assert [p.id for p in week[TODAY]] == ["mon-1", "mon-2"]
        assert {p.total_columns for p in week[TODAY]} == {2}
        assert [(p.id, p.width) for p in week[TOMORROW]] == [("tue", 100.0)]
        assert [p.id for p in week[TODAY + timedelta(days=6)]] == ["sun"]
        assert week[TODAY + timedelta(days=3)] == []

    def test_week_layout_accepts_generators(self, settings):
        events = (e for e in [_event("a", (9, 0), (10, 0), day=TOMORROW)])
        week = compute_week_layout(events, iter([]), TODAY, settings)
        assert [p.id for p in week[TOMORROW]] == ["a"]
