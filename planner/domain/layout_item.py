"""
Calendar items accepted by the overlap layout.

Events and tasks arrive from the store layer in different shapes. They are
kept as two explicit types and converted into Interval by the normalizer, so
the layout core never has to guess what an item is.
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class CalendarEventItem:
    """
    Timed calendar event

    Fields:
    - start_time / end_time: instants; only their time-of-day is used for layout
    - all_day: all-day events are shown in a separate strip and never laid out
    - payload: source object for the rendering layer (defaults to the item itself)
    """
    id: str
    start_time: datetime
    end_time: datetime
    all_day: bool = False
    payload: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class TaskItem:
    """
    Task placed on the day timeline

    Fields:
    - scheduled_time: "HH:MM", None when the task is not on the timeline
    - duration: minutes, positive int; anything else falls back to the default
    - scheduled_date: the day the task is planned for (used by day/week selection)
    """
    id: str
    scheduled_time: str | None = None
    duration: int | None = None
    all_day: bool = False
    scheduled_date: date | None = None
    payload: Any = field(default=None, compare=False, repr=False)
