"""
Interval value objects for the day timeline.

All times are minutes since midnight on a single day, half-open: [start, end).
An interval that ends at minute M does not overlap one that starts at M.
"""
from dataclasses import dataclass, field
from typing import Any, Literal

MINUTES_PER_DAY = 1440

KIND_EVENT = "event"
KIND_TASK = "task"

IntervalKind = Literal["event", "task"]


@dataclass(frozen=True)
class Interval:
    id: str
    start_minutes: int
    end_minutes: int
    kind: IntervalKind
    payload: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not 0 <= self.start_minutes < MINUTES_PER_DAY:
            raise ValueError(f"start_minutes out of range: {self.start_minutes}")
        if not self.start_minutes < self.end_minutes <= MINUTES_PER_DAY:
            raise ValueError(
                f"end_minutes must be in ({self.start_minutes}, {MINUTES_PER_DAY}]: {self.end_minutes}"
            )

    @property
    def sort_key(self) -> tuple[int, str]:
        return self.start_minutes, self.id

    def overlaps(self, other: "Interval") -> bool:
        return overlaps(self, other)


@dataclass(frozen=True)
class PositionedInterval:
    """Interval placed into a column of its cluster, with percent offsets for rendering."""
    id: str
    start_minutes: int
    end_minutes: int
    kind: IntervalKind
    column_index: int
    total_columns: int
    left: float
    width: float
    payload: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_interval(
        cls,
        interval: Interval,
        column_index: int,
        total_columns: int,
        left: float,
        width: float,
    ) -> "PositionedInterval":
        return cls(
            id=interval.id,
            start_minutes=interval.start_minutes,
            end_minutes=interval.end_minutes,
            kind=interval.kind,
            column_index=column_index,
            total_columns=total_columns,
            left=left,
            width=width,
            payload=interval.payload,
        )


def overlaps(a: Interval, b: Interval) -> bool:
    """Half-open overlap: touching intervals do not overlap."""
    return a.start_minutes < b.end_minutes and b.start_minutes < a.end_minutes
