"""
Job Backend Port - Abstract interface for the remote job store.
"""

from abc import ABC, abstractmethod
from typing import Optional

from jobtracker.domain.entities import Job
from jobtracker.domain.value_objects import StatsSummary


class BackendError(Exception):
    """
    A backend request was rejected or could not be completed.

    Attributes:
        message: Description of the failure for logs
        status_code: HTTP status, None when the backend was unreachable
        detail: Message supplied by the backend (its ``msg`` field), if any
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.detail = detail


class JobBackendPort(ABC):
    """Abstract interface for job persistence owned by the backend."""

    @abstractmethod
    async def list_jobs(self) -> list[Job]:
        """Fetch the full job collection."""
        pass

    @abstractmethod
    async def get_stats(self) -> StatsSummary:
        """Fetch per-status counts."""
        pass

    @abstractmethod
    async def create_job(self, payload: dict) -> Job:
        """Create a job from a draft payload. Returns the created job."""
        pass

    @abstractmethod
    async def update_job(self, job_id: str, payload: dict) -> Job:
        """Replace all fields of a job. Returns the updated job."""
        pass

    @abstractmethod
    async def delete_job(self, job_id: str) -> None:
        """Delete a job."""
        pass
