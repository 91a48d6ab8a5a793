"""
FilterState Value Object - Immutable search, filter and page selection.
"""

from dataclasses import dataclass, replace
from typing import Optional

from jobtracker.domain.entities import JobStatus, JobType

ALL = "all"
DEFAULT_PAGE_SIZE = 5


def _optional_enum(enum_cls, value):
    """Map selector text onto an enum member, with "all"/empty as None."""
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    text = str(value).strip().lower()
    if text in ("", ALL):
        return None
    return enum_cls.parse(text)


@dataclass(frozen=True)
class FilterState:
    """
    Immutable value object for the dashboard's list controls.

    Attributes:
        search_query: Free text matched against company names
        job_type_filter: Job type to keep, None for all types
        status_filter: Status to keep, None for all statuses
        current_page: 1-based page number
        page_size: Jobs per page
    """

    search_query: str = ""
    job_type_filter: Optional[JobType] = None
    status_filter: Optional[JobStatus] = None
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        """Normalize selector values and validate paging."""
        object.__setattr__(self, "search_query", self.search_query or "")
        object.__setattr__(
            self, "job_type_filter", _optional_enum(JobType, self.job_type_filter)
        )
        object.__setattr__(
            self, "status_filter", _optional_enum(JobStatus, self.status_filter)
        )
        if self.current_page < 1:
            raise ValueError("current_page must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    # Changing a predicate always returns to the first page.

    def with_search(self, query: str) -> "FilterState":
        """Create new state with updated search text."""
        return replace(self, search_query=query or "", current_page=1)

    def with_job_type(self, job_type) -> "FilterState":
        """Create new state with updated job type filter ("all" clears it)."""
        return replace(self, job_type_filter=_optional_enum(JobType, job_type), current_page=1)

    def with_status(self, status) -> "FilterState":
        """Create new state with updated status filter ("all" clears it)."""
        return replace(self, status_filter=_optional_enum(JobStatus, status), current_page=1)

    def with_page(self, page: int) -> "FilterState":
        """Create new state on the given page."""
        return replace(self, current_page=page)

    def next_page(self, total_pages: int) -> "FilterState":
        """Advance one page unless already on the last one."""
        if self.current_page < total_pages:
            return self.with_page(self.current_page + 1)
        return self

    def previous_page(self) -> "FilterState":
        """Go back one page unless already on the first one."""
        if self.current_page > 1:
            return self.with_page(self.current_page - 1)
        return self
