"""
Filter Engine - Search, filter and pagination of the job collection.

Pure functions: the collection keeps its order, nothing is re-sorted, and
a page number past the last page is returned as an empty page rather than
clamped. Callers that change a predicate go through FilterState.with_*,
which already moves back to page 1.
"""

import math
from dataclasses import dataclass
from typing import Iterable

from jobtracker.domain.entities import Job
from jobtracker.domain.value_objects import FilterState


@dataclass(frozen=True)
class VisiblePage:
    """One page of the filtered collection."""

    items: tuple[Job, ...]
    total_pages: int
    match_count: int

    @property
    def is_empty(self) -> bool:
        return not self.items


def matches(job: Job, state: FilterState) -> bool:
    """Check the job against every active predicate."""
    if state.search_query and state.search_query.lower() not in job.company.lower():
        return False
    if state.job_type_filter is not None and job.job_type != state.job_type_filter:
        return False
    if state.status_filter is not None and job.status != state.status_filter:
        return False
    return True


def filter_jobs(jobs: Iterable[Job], state: FilterState) -> list[Job]:
    """Return the filtered set, before pagination, in input order."""
    return [job for job in jobs if matches(job, state)]


def total_pages(match_count: int, page_size: int) -> int:
    return math.ceil(match_count / page_size)


def visible_jobs(jobs: Iterable[Job], state: FilterState) -> VisiblePage:
    """
    Derive the visible page from the collection.

    Args:
        jobs: The full job collection.
        state: Current search/filter/page selection.

    Returns:
        VisiblePage with at most ``state.page_size`` items.
    """
    matched = filter_jobs(jobs, state)
    start = (state.current_page - 1) * state.page_size
    end = state.current_page * state.page_size
    return VisiblePage(
        items=tuple(matched[start:end]),
        total_pages=total_pages(len(matched), state.page_size),
        match_count=len(matched),
    )
