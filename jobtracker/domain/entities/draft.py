"""
Job Draft Entity - Form staging for creating or editing a job.
"""

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Union

from .job import Job, JobStatus, JobType


@dataclass(frozen=True)
class Creating:
    """Draft describes a job that does not exist yet."""


@dataclass(frozen=True)
class Editing:
    """Draft edits the job with the given backend id."""

    job_id: str

    def __post_init__(self) -> None:
        if not self.job_id:
            raise ValueError("job_id is required")


DraftMode = Union[Creating, Editing]

FORM_FIELDS = ("company", "position", "status", "job_type", "interview_date")


@dataclass(frozen=True)
class JobDraft:
    """
    Transient form representation of a Job.

    Values stay as entered (plain text) until ``to_payload`` maps them
    onto the backend shape.

    Attributes:
        company: Company name as typed
        position: Position as typed
        status: Status value from the status selector
        job_type: Job type value from the job type selector
        interview_date: Calendar date ``YYYY-MM-DD`` or empty
        mode: Creating or Editing(job_id)
    """

    company: str = ""
    position: str = ""
    status: str = JobStatus.PENDING.value
    job_type: str = JobType.FULL_TIME.value
    interview_date: str = ""
    mode: DraftMode = field(default_factory=Creating)

    @classmethod
    def blank(cls) -> "JobDraft":
        """Fresh draft for the "Add" form."""
        return cls()

    @classmethod
    def from_job(cls, job: Job) -> "JobDraft":
        """Draft pre-filled from an existing job for the "Edit" form."""
        return cls(
            company=job.company,
            position=job.position,
            status=job.status.value,
            job_type=job.job_type.value,
            interview_date=job.interview_date.date().isoformat() if job.interview_date else "",
            mode=Editing(job.id),
        )

    @property
    def is_editing(self) -> bool:
        return isinstance(self.mode, Editing)

    def with_field(self, name: str, value: str) -> "JobDraft":
        """Return a new draft with one form field changed."""
        if name not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {name}")
        return replace(self, **{name: value if value is not None else ""})

    def to_payload(self) -> dict:
        """
        Build the request body for create/update.

        Raises:
            ValueError: If a required field is empty, an enum field holds
                an unknown value or the date is not ``YYYY-MM-DD``.
        """
        company = self.company.strip()
        position = self.position.strip()
        if not company:
            raise ValueError("company is required")
        if not position:
            raise ValueError("position is required")

        interview_date = self.interview_date.strip()
        if interview_date:
            try:
                date.fromisoformat(interview_date)
            except ValueError:
                raise ValueError(
                    f"Invalid interview date '{interview_date}' (expected YYYY-MM-DD)"
                ) from None

        return {
            "company": company,
            "position": position,
            "status": JobStatus.parse(self.status).value,
            "jobType": JobType.parse(self.job_type).value,
            "interviewDate": interview_date,
        }
