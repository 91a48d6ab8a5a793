"""
Job Entity - Represents one tracked job application.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional


class _ParseableEnum(Enum):
    """Enum whose members can be looked up from free form text."""

    @classmethod
    def parse(cls, value):
        """
        Coerce raw input onto a member.

        Matches the member value exactly, ignoring case and surrounding
        whitespace. Anything else is rejected.

        Raises:
            ValueError: If the value is not one of the enumerated values.
        """
        if isinstance(value, cls):
            return value
        text = str(value or "").strip().lower()
        for member in cls:
            if member.value == text:
                return member
        allowed = ", ".join(m.value for m in cls)
        raise ValueError(f"Invalid {cls.__name__} '{value}' (expected one of: {allowed})")

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        return self.value.capitalize()


class JobStatus(_ParseableEnum):
    """Status of a job application."""

    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"
    ACCEPTED = "accepted"


class JobType(_ParseableEnum):
    """Kind of position applied for."""

    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    INTERNSHIP = "internship"
    REMOTE = "remote"


def parse_datetime(value) -> Optional[datetime]:
    """
    Parse a wire timestamp into an aware datetime.

    Accepts ISO-8601 strings (with or without a trailing ``Z``) and
    datetime objects. Naive values are taken as UTC. Empty values give None.
    """
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        dt = value
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        dt = datetime.fromisoformat(text)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class Job:
    """
    Job entity as stored by the backend.

    Attributes:
        id: Backend identifier, immutable after creation
        company: Company name
        position: Position title
        status: Application status
        job_type: Kind of position
        interview_date: Scheduled interview, None when not scheduled
    """

    id: str
    company: str
    position: str
    status: JobStatus = JobStatus.PENDING
    job_type: JobType = JobType.FULL_TIME
    interview_date: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Validate and normalize job data."""
        if not self.id:
            raise ValueError("id is required")
        if not self.company:
            raise ValueError("company is required")
        if not self.position:
            raise ValueError("position is required")

        # Frozen dataclass: normalize through object.__setattr__
        object.__setattr__(self, "status", JobStatus.parse(self.status))
        object.__setattr__(self, "job_type", JobType.parse(self.job_type))
        object.__setattr__(self, "interview_date", parse_datetime(self.interview_date))

    @property
    def display_name(self) -> str:
        """Human-readable job display name."""
        return f"{self.position} at {self.company}"

    @property
    def has_interview(self) -> bool:
        return self.interview_date is not None

    @classmethod
    def from_dict(cls, data: dict) -> "Job":
        """Create Job from a backend JSON object."""
        return cls(
            id=str(data.get("_id") or data.get("id") or ""),
            company=data.get("company", ""),
            position=data.get("position", ""),
            status=data.get("status") or JobStatus.PENDING,
            job_type=data.get("jobType") or JobType.FULL_TIME,
            interview_date=data.get("interviewDate"),
        )
