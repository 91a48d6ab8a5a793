# Domain Entities
from .job import Job, JobStatus, JobType
from .draft import Creating, DraftMode, Editing, JobDraft

__all__ = [
    "Job",
    "JobStatus",
    "JobType",
    "JobDraft",
    "DraftMode",
    "Creating",
    "Editing",
]
