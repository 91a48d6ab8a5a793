"""
Job Store - Authoritative job collection synchronized with the backend.

Owns the in-memory collection and the stats snapshot. Every mutation goes
to the backend first; local state only changes when a refresh succeeds, so
a failure never leaves a half-applied change behind.

Mutations are not serialized: two overlapping calls may settle in any
order and whichever refresh lands last wins.
"""

import asyncio
import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, Optional

from jobtracker.application.interfaces import (
    BackendError,
    FeedbackPort,
    JobBackendPort,
    NoticeLevel,
)
from jobtracker.domain.entities import Editing, Job, JobDraft
from jobtracker.domain.value_objects import StatsSummary
from .reminder_scheduler import ReminderScheduler


logger = logging.getLogger(__name__)

DELETE_CONFIRMATION = "Are you sure you want to delete this job?"


class MutationState(Enum):
    """Lifecycle of a create/update/delete call."""
    IDLE = "idle"
    IN_FLIGHT = "in_flight"
    SETTLED_SUCCESS = "settled_success"
    SETTLED_ERROR = "settled_error"


EventCallback = Callable[[str, dict], None]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class JobStore:
    """
    Use case owning the job collection and summary stats.

    Events emitted to listeners:
    - jobs_changed: collection replaced after a successful fetch
    - stats_changed: stats snapshot replaced
    - state_change: mutation state moved
    - error: a backend call or submission failed
    """

    def __init__(
        self,
        backend: JobBackendPort,
        scheduler: ReminderScheduler,
        feedback: FeedbackPort,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """
        Initialize the store.

        Args:
            backend: Remote job backend.
            scheduler: Interview reminder scheduler, run after each fetch.
            feedback: Notices and confirmations shown to the user.
            clock: Source of "now" for reminders.
        """
        self.backend = backend
        self.scheduler = scheduler
        self.feedback = feedback
        self.clock = clock

        self._jobs: list[Job] = []
        self._stats: Optional[StatsSummary] = None
        self._state = MutationState.IDLE
        self._in_flight = 0
        self._refreshing = 0
        self.last_error: Optional[str] = None
        self._event_callbacks: list[EventCallback] = []

    # ==================== State ====================

    @property
    def jobs(self) -> list[Job]:
        """Snapshot of the current collection."""
        return list(self._jobs)

    @property
    def stats(self) -> Optional[StatsSummary]:
        return self._stats

    @property
    def state(self) -> MutationState:
        return self._state

    @property
    def refreshing(self) -> bool:
        """True while a job fetch is pending."""
        return self._refreshing > 0

    def find(self, job_id: str) -> Optional[Job]:
        """Look a job up in the local collection."""
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def add_event_listener(self, callback: EventCallback) -> None:
        """Add an event listener for store events."""
        self._event_callbacks.append(callback)

    def _emit_event(self, event: str, data: dict) -> None:
        """Emit an event to all listeners."""
        for callback in self._event_callbacks:
            try:
                callback(event, data)
            except Exception as e:
                logger.error(f"Event callback error: {e}")

    def _set_state(self, state: MutationState) -> None:
        self._state = state
        self._emit_event("state_change", {"state": state.value})

    def _fail(self, message: str) -> None:
        self.last_error = message
        self.feedback.notice(message, NoticeLevel.ERROR)
        self._emit_event("error", {"message": message})

    # ==================== Queries ====================

    async def load(self) -> None:
        """Dashboard mount: ask for notification permission, then fetch."""
        self.scheduler.request_permission()
        await asyncio.gather(self.refresh_jobs(), self.refresh_stats())

    async def refresh_jobs(self) -> bool:
        """
        Replace the collection with the backend's.

        After a successful fetch every job is checked for a due interview
        reminder. On failure the previous collection is kept.

        Returns:
            True if the collection was refreshed.
        """
        self._refreshing += 1
        try:
            jobs = await self.backend.list_jobs()
        except BackendError as e:
            logger.warning(f"Loading jobs failed: {e.message}")
            self._fail("Failed to load jobs")
            return False
        finally:
            self._refreshing -= 1

        self._jobs = list(jobs)
        self.last_error = None
        logger.info(f"Loaded {len(self._jobs)} jobs")
        self._emit_event("jobs_changed", {"count": len(self._jobs)})

        now = self.clock()
        for job in self._jobs:
            self.scheduler.check_and_notify(job, now)
        return True

    async def refresh_stats(self) -> bool:
        """
        Replace the stats snapshot with the backend's.

        Returns:
            True if the snapshot was refreshed.
        """
        try:
            stats = await self.backend.get_stats()
        except BackendError as e:
            logger.warning(f"Loading stats failed: {e.message}")
            self._fail("Failed to load job stats")
            return False

        self._stats = stats
        self._emit_event("stats_changed", {"total": stats.total})
        return True

    async def _refresh_all(self) -> None:
        await asyncio.gather(self.refresh_jobs(), self.refresh_stats())

    # ==================== Mutations ====================

    async def _mutate(
        self,
        call: Callable[[], Awaitable[object]],
        success_message: str,
        failure_message: str,
    ) -> bool:
        """
        Run one backend mutation through the state machine.

        Refreshes jobs and stats after success. Backend errors and draft
        validation errors become notices; neither touches local state.
        """
        self._in_flight += 1
        self._set_state(MutationState.IN_FLIGHT)
        try:
            try:
                await call()
            except BackendError as e:
                logger.warning(f"{failure_message}: {e.message}")
                self._fail(e.detail or failure_message)
                self._set_state(MutationState.SETTLED_ERROR)
                return False
            except ValueError as e:
                logger.info(f"Rejected submission: {e}")
                self._fail(str(e))
                self._set_state(MutationState.SETTLED_ERROR)
                return False

            self.last_error = None
            self.feedback.notice(success_message, NoticeLevel.SUCCESS)
            self._set_state(MutationState.SETTLED_SUCCESS)
            await self._refresh_all()
            return True
        finally:
            self._in_flight -= 1
            self._set_state(
                MutationState.IN_FLIGHT if self._in_flight else MutationState.IDLE
            )

    async def create_job(self, draft: JobDraft) -> bool:
        """
        Create a job from the draft.

        Returns:
            True if the backend accepted it.
        """

        async def call():
            payload = draft.to_payload()
            created = await self.backend.create_job(payload)
            logger.info(f"Created job {created.id}")

        return await self._mutate(call, "Job added", "Operation failed")

    async def update_job(self, job_id: str, draft: JobDraft) -> bool:
        """
        Replace all fields of a job with the draft's.

        Returns:
            True if the backend accepted it.
        """

        async def call():
            payload = draft.to_payload()
            await self.backend.update_job(job_id, payload)
            logger.info(f"Updated job {job_id}")

        return await self._mutate(call, "Job updated", "Operation failed")

    async def submit(self, draft: JobDraft) -> JobDraft:
        """
        Submit the form in its current mode.

        Returns:
            A blank draft after success, the unchanged draft after failure.
        """
        if isinstance(draft.mode, Editing):
            ok = await self.update_job(draft.mode.job_id, draft)
        else:
            ok = await self.create_job(draft)
        return JobDraft.blank() if ok else draft

    async def delete_job(self, job_id: str) -> bool:
        """
        Delete a job after the user confirms.

        Declining returns False before any request is made.

        Returns:
            True if the job was deleted.
        """
        if not await self.feedback.confirm(DELETE_CONFIRMATION):
            logger.debug(f"Deletion of {job_id} cancelled")
            return False

        async def call():
            await self.backend.delete_job(job_id)
            logger.info(f"Deleted job {job_id}")

        return await self._mutate(call, "Job deleted", "Failed to delete job")
