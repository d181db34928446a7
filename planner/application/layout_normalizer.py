"""
Interval normalizer - converts events and tasks into day-timeline intervals.

Events:  all-day skipped; minutes from the time-of-day of start/end.
         End on a later day is clipped to midnight (1440).
         Zero/negative length is stretched to the minimum event duration.
Tasks:   all-day or unscheduled skipped; start from "HH:MM",
         end = start + duration (default when unset or not a positive int).
"""
import logging
from datetime import datetime
from typing import Iterable

from planner.domain.errors import ValidationError
from planner.domain.interval import Interval, MINUTES_PER_DAY, KIND_EVENT, KIND_TASK
from planner.domain.layout_item import CalendarEventItem, TaskItem
from planner.utils.validation import parse_time_of_day

logger = logging.getLogger(__name__)

DEFAULT_TASK_DURATION = 30
MIN_EVENT_DURATION = 1


def minutes_of_day(moment: datetime) -> int:
    return moment.hour * 60 + moment.minute


def is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def wall_clock(moment: datetime) -> datetime:
    """Local clock reading; offsets are not converted, so aware and naive instants compare."""
    return moment.replace(tzinfo=None)


def event_to_interval(event: CalendarEventItem, min_event_duration: int = MIN_EVENT_DURATION) -> Interval:
    start_time, end_time = wall_clock(event.start_time), wall_clock(event.end_time)
    start = minutes_of_day(start_time)
    if end_time <= start_time:
        end = start
    elif end_time.date() > start_time.date():
        end = MINUTES_PER_DAY
    else:
        end = minutes_of_day(end_time)

    # seconds are dropped, so a sub-minute event collapses to zero length too
    if end <= start:
        clamped = min(start + max(min_event_duration, 1), MINUTES_PER_DAY)
        logger.warning(
            "Event %s has non-positive duration (%d..%d), clamped to %d",
            event.id, start, end, clamped,
        )
        end = clamped

    return Interval(
        id=event.id,
        start_minutes=start,
        end_minutes=end,
        kind=KIND_EVENT,
        payload=event.payload if event.payload is not None else event,
    )


def task_to_interval(task: TaskItem, default_duration: int = DEFAULT_TASK_DURATION) -> Interval:
    """Raises ValidationError if scheduled_time is not HH:MM."""
    try:
        start = parse_time_of_day(task.scheduled_time)
    except ValueError as e:
        raise ValidationError(
            f"Task {task.id}: invalid scheduled time {task.scheduled_time!r} ({e})",
            item_id=task.id,
        ) from e

    duration = task.duration if is_positive_int(task.duration) else default_duration
    return Interval(
        id=task.id,
        start_minutes=start,
        end_minutes=min(start + duration, MINUTES_PER_DAY),
        kind=KIND_TASK,
        payload=task.payload if task.payload is not None else task,
    )


def is_task_scheduled(task: TaskItem) -> bool:
    return not task.all_day and bool(task.scheduled_time)


def normalize_items(
    events: Iterable[CalendarEventItem],
    tasks: Iterable[TaskItem],
    default_task_duration: int = DEFAULT_TASK_DURATION,
    min_event_duration: int = MIN_EVENT_DURATION,
) -> list[Interval]:
    """Flatten events and tasks into intervals. Raises ValidationError on bad input."""
    if not is_positive_int(default_task_duration):
        raise ValueError(f"default_task_duration must be a positive int: {default_task_duration!r}")

    intervals: list[Interval] = []
    for event in events:
        if event.all_day:
            continue
        intervals.append(event_to_interval(event, min_event_duration))

    for task in tasks:
        if not is_task_scheduled(task):
            continue
        intervals.append(task_to_interval(task, default_task_duration))

    seen: set[str] = set()
    for interval in intervals:
        if interval.id in seen:
            raise ValidationError(f"Duplicate item id: {interval.id}", item_id=interval.id)
        seen.add(interval.id)

    return intervals
