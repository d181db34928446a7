"""Cluster builder - groups intervals connected transitively by overlap."""
import logging
from typing import Iterable

from planner.domain.interval import Interval, overlaps

logger = logging.getLogger(__name__)


def build_clusters(intervals: Iterable[Interval]) -> list[list[Interval]]:
    """
    Partition intervals into maximal overlap-connected clusters.

    Intervals are processed by (start_minutes, id). An interval that overlaps
    members of several open clusters joins them into the earliest one.
    Members of each returned cluster are ordered by (start_minutes, id);
    clusters are ordered by their first member.
    """
    clusters: list[list[Interval]] = []

    for interval in sorted(intervals, key=lambda i: i.sort_key):
        hits = [
            idx for idx, cluster in enumerate(clusters)
            if any(overlaps(interval, member) for member in cluster)
        ]

        if not hits:
            clusters.append([interval])
            continue

        target = clusters[hits[0]]
        # start-ordered visiting never bridges; this guards a change of sort order
        if len(hits) > 1:
            logger.debug("Interval %s bridges %d clusters, merging", interval.id, len(hits))
            for idx in reversed(hits[1:]):
                target.extend(clusters.pop(idx))
            target.sort(key=lambda i: i.sort_key)
        target.append(interval)

    return clusters
