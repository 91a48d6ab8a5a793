"""
CSV Export - Job list as a comma-separated download.
"""

import csv
import io
from datetime import datetime
from typing import Iterable, Optional

from jobtracker.domain.entities import Job

HEADERS = ["Company", "Position", "Status", "Job Type", "Interview Date"]
DATE_FORMAT = "%m/%d/%Y"


def format_date(value: Optional[datetime]) -> str:
    """Render an interview date for exports, empty when absent."""
    return value.strftime(DATE_FORMAT) if value else ""


def job_row(job: Job) -> list[str]:
    """The five exported cells of a job, in header order."""
    return [
        job.company,
        job.position,
        job.status.value,
        job.job_type.value,
        format_date(job.interview_date),
    ]


def to_csv(jobs: Iterable[Job]) -> bytes:
    """
    Serialize jobs to UTF-8 CSV.

    One header row, then one row per job in input order. Every row ends
    with a newline. Cells containing a comma, quote or line break are
    quoted; all other cells are written as-is.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(HEADERS)
    for job in jobs:
        writer.writerow(job_row(job))
    return buffer.getvalue().encode("utf-8")
