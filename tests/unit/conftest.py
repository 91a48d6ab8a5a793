"""
Shared fixtures and fakes for unit tests.
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from jobtracker.application.interfaces import (
    BackendError,
    FeedbackPort,
    JobBackendPort,
    NoticeLevel,
    NotifierPort,
)
from jobtracker.application.use_cases import ReminderScheduler
from jobtracker.config.settings import Settings
from jobtracker.domain.entities import Job
from jobtracker.domain.value_objects import StatsSummary


NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def make_job(
    job_id: str = "1",
    company: str = "Acme",
    position: str = "Engineer",
    status: str = "pending",
    job_type: str = "full-time",
    interview_date: Optional[datetime] = None,
) -> Job:
    return Job(
        id=job_id,
        company=company,
        position=position,
        status=status,
        job_type=job_type,
        interview_date=interview_date,
    )


class FakeNotifier(NotifierPort):
    """Records notifications instead of showing them."""

    def __init__(self, granted: bool = True) -> None:
        self.granted = granted
        self.permission_requests = 0
        self.shown: list[tuple[str, str]] = []

    def request_permission(self) -> bool:
        self.permission_requests += 1
        return self.granted

    def is_granted(self) -> bool:
        return self.granted

    def show(self, title: str, body: str) -> None:
        self.shown.append((title, body))


class FakeFeedback(FeedbackPort):
    """Records notices and answers confirmations with a fixed value."""

    def __init__(self, confirm_answer: bool = True) -> None:
        self.confirm_answer = confirm_answer
        self.notices: list[tuple[str, NoticeLevel]] = []
        self.confirmations: list[str] = []

    def notice(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        self.notices.append((message, level))

    async def confirm(self, message: str) -> bool:
        self.confirmations.append(message)
        return self.confirm_answer

    @property
    def messages(self) -> list[str]:
        return [message for message, _ in self.notices]


class FakeBackend(JobBackendPort):
    """
    In-memory backend.

    Set ``fail_on`` to an operation name ("list_jobs", "create_job", ...)
    to make that call raise the given BackendError.

    Queue events under ``gates[operation]`` to hold calls open: each call
    takes the next event and waits for it before answering.
    """

    def __init__(self, jobs: Optional[list[Job]] = None, stats: Optional[dict] = None) -> None:
        self.jobs: list[Job] = list(jobs or [])
        self.stats = stats if stats is not None else {"pending": len(self.jobs)}
        self.calls: list[tuple] = []
        self.fail_on: dict[str, BackendError] = {}
        self.gates: dict[str, list[asyncio.Event]] = {}
        self._next_id = 100

    def _check(self, operation: str, *args) -> None:
        self.calls.append((operation, *args))
        if operation in self.fail_on:
            raise self.fail_on[operation]

    async def _wait(self, operation: str) -> None:
        queue = self.gates.get(operation)
        if queue:
            await queue.pop(0).wait()

    async def list_jobs(self) -> list[Job]:
        self._check("list_jobs")
        snapshot = list(self.jobs)
        await self._wait("list_jobs")
        return snapshot

    async def get_stats(self) -> StatsSummary:
        self._check("get_stats")
        return StatsSummary(dict(self.stats))

    async def create_job(self, payload: dict) -> Job:
        self._check("create_job", payload)
        await self._wait("create_job")
        self._next_id += 1
        job = Job.from_dict({"_id": str(self._next_id), **payload})
        self.jobs.append(job)
        return job

    async def update_job(self, job_id: str, payload: dict) -> Job:
        self._check("update_job", job_id, payload)
        await self._wait("update_job")
        job = Job.from_dict({"_id": job_id, **payload})
        self.jobs = [job if j.id == job_id else j for j in self.jobs]
        return job

    async def delete_job(self, job_id: str) -> None:
        self._check("delete_job", job_id)
        await self._wait("delete_job")
        self.jobs = [j for j in self.jobs if j.id != job_id]

    @property
    def operations(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Create test settings rooted in a temporary directory."""
    return Settings(
        data_dir=tmp_path / "data",
        api_base_url="http://backend.test/api",
        page_size=5,
    )


@pytest.fixture
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture
def feedback() -> FakeFeedback:
    return FakeFeedback()


@pytest.fixture
def scheduler(notifier: FakeNotifier) -> ReminderScheduler:
    return ReminderScheduler(notifier)


@pytest.fixture
def soon() -> datetime:
    """An interview three hours after NOW."""
    return NOW + timedelta(hours=3)
