"""
Overlap layout for the day/week calendar views.

Pure read-layer: events + tasks in, positioned intervals out.
Pipeline: normalize -> cluster -> assign columns -> position.
Every call recomputes from scratch; nothing is cached between calls.
"""
import logging
from datetime import date, timedelta
from typing import Iterable, Sequence

from planner.config import Settings, get_settings
from planner.domain.interval import PositionedInterval
from planner.domain.layout_item import CalendarEventItem, TaskItem
from planner.application.layout_normalizer import normalize_items
from planner.application.layout_clusters import build_clusters
from planner.application.layout_columns import assign_columns
from planner.application.layout_position import compute_position

logger = logging.getLogger(__name__)

DAYS_IN_WEEK = 7


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def compute_layout(
    events: Iterable[CalendarEventItem],
    tasks: Iterable[TaskItem],
    settings: Settings | None = None,
) -> list[PositionedInterval]:
    """
    Lay out timed events and tasks of a single day.

    All-day items and tasks without a scheduled time are left out.
    Output is ordered cluster by cluster, members by (start_minutes, id).

    Raises:
        ValidationError: malformed scheduled time or duplicate id
        InvariantViolation: only with LAYOUT_STRICT_INVARIANTS enabled
    """
    settings = settings or get_settings()

    intervals = normalize_items(
        events,
        tasks,
        default_task_duration=settings.LAYOUT_DEFAULT_TASK_DURATION,
        min_event_duration=settings.LAYOUT_MIN_EVENT_DURATION,
    )
    if not intervals:
        return []

    clusters = build_clusters(intervals)

    positioned: list[PositionedInterval] = []
    for cluster in clusters:
        for interval, column_index, total_columns in assign_columns(
            cluster, strict=settings.LAYOUT_STRICT_INVARIANTS,
        ):
            left, width = compute_position(column_index, total_columns)
            positioned.append(
                PositionedInterval.from_interval(interval, column_index, total_columns, left, width)
            )

    logger.debug("Layout: %d item(s) in %d cluster(s)", len(positioned), len(clusters))
    return positioned


def select_items_for_day(
    events: Iterable[CalendarEventItem],
    tasks: Iterable[TaskItem],
    day: date,
) -> tuple[list[CalendarEventItem], list[TaskItem]]:
    """Events starting on `day` and tasks scheduled for `day`."""
    day_events = [e for e in events if e.start_time.date() == day]
    day_tasks = [t for t in tasks if t.scheduled_date == day]
    return day_events, day_tasks


def compute_day_layout(
    events: Iterable[CalendarEventItem],
    tasks: Iterable[TaskItem],
    day: date,
    settings: Settings | None = None,
) -> list[PositionedInterval]:
    day_events, day_tasks = select_items_for_day(events, tasks, day)
    return compute_layout(day_events, day_tasks, settings)


def compute_week_layout(
    events: Sequence[CalendarEventItem],
    tasks: Sequence[TaskItem],
    week_start: date,
    settings: Settings | None = None,
) -> dict[date, list[PositionedInterval]]:
    """Day layout for each of the seven dates starting at week_start (each day is independent)."""
    events, tasks = list(events), list(tasks)
    return {
        day: compute_day_layout(events, tasks, day, settings)
        for day in (week_start + timedelta(days=offset) for offset in range(DAYS_IN_WEEK))
    }
