"""
Stats Aggregator - Per-status counts for the summary cards.
"""

from typing import Iterable, Mapping

from jobtracker.domain.entities import Job, JobStatus
from jobtracker.domain.value_objects import StatsSummary


def from_summary(raw: Mapping) -> StatsSummary:
    """
    Wrap a backend summary as a snapshot.

    Keys are kept in backend order; counts are coerced to int.

    Raises:
        ValueError: If a count is not a non-negative integer.
    """
    counts = []
    for status, count in raw.items():
        try:
            value = int(count)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid count for '{status}': {count!r}") from None
        counts.append((str(status), value))
    return StatsSummary(tuple(counts))


def from_jobs(jobs: Iterable[Job]) -> StatsSummary:
    """Count jobs per status locally; every status is present."""
    counts = {status.value: 0 for status in JobStatus}
    for job in jobs:
        counts[job.status.value] += 1
    return StatsSummary(counts)


def display_rows(summary: StatsSummary) -> list[tuple[str, int]]:
    """Label and count per status, in summary order."""
    return [(name.capitalize(), count) for name, count in summary.counts]


def total(summary: StatsSummary) -> int:
    return summary.total
