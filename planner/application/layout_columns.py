"""
Column assigner - places each member of a cluster into a column.

The column count is the cluster's peak concurrency. Columns are filled
first-fit by ascending index, processing members by (start_minutes, id),
so the result is reproducible for the same input.
"""
import logging
from typing import Sequence

from planner.domain.errors import InvariantViolation
from planner.domain.interval import Interval, overlaps

logger = logging.getLogger(__name__)

# At equal times ends sort before starts, matching the half-open overlap rule.
_BOUNDARY_END = 0
_BOUNDARY_START = 1


def peak_concurrency(cluster: Sequence[Interval]) -> int:
    """Maximum number of members active at the same instant."""
    if len(cluster) <= 1:
        return 1

    boundaries: list[tuple[int, int, str]] = []
    for interval in cluster:
        boundaries.append((interval.start_minutes, _BOUNDARY_START, interval.id))
        boundaries.append((interval.end_minutes, _BOUNDARY_END, interval.id))
    boundaries.sort()

    current = 0
    peak = 1
    for _time, kind, _id in boundaries:
        if kind == _BOUNDARY_START:
            current += 1
            peak = max(peak, current)
        else:
            current -= 1

    return peak


def assign_columns(
    cluster: Sequence[Interval],
    strict: bool = False,
) -> list[tuple[Interval, int, int]]:
    """
    Assign a column to every member of the cluster.

    Returns:
        [(interval, column_index, total_columns)] ordered by (start_minutes, id)

    Raises:
        InvariantViolation: strict mode only, when a member fits no column
    """
    total_columns = peak_concurrency(cluster)
    columns: list[list[Interval]] = [[] for _ in range(total_columns)]
    assigned: list[tuple[Interval, int, int]] = []

    for interval in sorted(cluster, key=lambda i: i.sort_key):
        column_index = next(
            (
                idx for idx, column in enumerate(columns)
                if not any(overlaps(interval, placed) for placed in column)
            ),
            None,
        )

        if column_index is None:
            message = (
                f"Interval {interval.id} fits none of {total_columns} column(s); "
                "peak concurrency is wrong"
            )
            if strict:
                raise InvariantViolation(message, item_id=interval.id)
            logger.error("%s, falling back to column 0", message)
            column_index = 0

        columns[column_index].append(interval)
        assigned.append((interval, column_index, total_columns))

    return assigned
