"""
Reminder Scheduler - Interview reminders and upcoming badges.

Evaluates each job's interview time against "now":
- Within the reminder window: a platform notification is shown, if the
  user granted permission.
- Within the badge horizon: the job list shows an "upcoming" badge.

By default nothing is remembered between checks, so every fetch inside the
window notifies again. Passing ``dedupe=True`` limits this to one
notification per job and interview time.
"""

import logging
from datetime import date, datetime, time, timedelta, timezone
from enum import Enum
from typing import Optional, Union

from jobtracker.application.interfaces import NotifierPort
from jobtracker.domain.entities import Job


logger = logging.getLogger(__name__)

REMINDER_TITLE = "📅 Interview Reminder"

HOUR = timedelta(hours=1)
DAY = timedelta(days=1)


class BadgeState(Enum):
    """Badge shown next to a job's interview date."""
    UPCOMING = "upcoming"
    NONE = "none"


def _as_aware(moment: Union[datetime, date]) -> datetime:
    """Promote dates and naive datetimes to aware UTC datetimes."""
    if not isinstance(moment, datetime):
        moment = datetime.combine(moment, time.min)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment


class ReminderScheduler:
    """
    Decides when an interview deserves a reminder or a badge.
    """

    DEFAULT_WINDOW_HOURS = 24.0
    DEFAULT_UPCOMING_DAYS = 2.0

    def __init__(
        self,
        notifier: NotifierPort,
        window_hours: float = DEFAULT_WINDOW_HOURS,
        upcoming_days: float = DEFAULT_UPCOMING_DAYS,
        dedupe: bool = False,
    ) -> None:
        """
        Initialize the scheduler.

        Args:
            notifier: Platform notification capability.
            window_hours: Reminder lookahead in hours.
            upcoming_days: Badge horizon in days.
            dedupe: Remember notified interviews and skip repeats.
        """
        self.notifier = notifier
        self.window_hours = window_hours
        self.upcoming_days = upcoming_days
        self.dedupe = dedupe
        self._notified: set[tuple[str, datetime]] = set()

    def request_permission(self) -> bool:
        """Ask for notification permission (once, at dashboard mount)."""
        try:
            granted = self.notifier.request_permission()
        except Exception as e:
            logger.warning(f"Notification permission request failed: {e}")
            return False
        logger.info(f"Notification permission {'granted' if granted else 'denied'}")
        return granted

    @staticmethod
    def hours_until(job: Job, now: datetime) -> Optional[float]:
        """Hours from ``now`` to the interview, None without an interview."""
        if job.interview_date is None:
            return None
        return (job.interview_date - _as_aware(now)) / HOUR

    def is_due(self, job: Job, now: datetime) -> bool:
        """Check if the interview falls inside the reminder window."""
        hours = self.hours_until(job, now)
        return hours is not None and 0 <= hours <= self.window_hours

    def check_and_notify(self, job: Job, now: datetime) -> bool:
        """
        Notify about the job's interview if it is due.

        Returns:
            True if a notification was shown.
        """
        if not self.is_due(job, now):
            return False
        if not self.notifier.is_granted():
            return False

        key = (job.id, job.interview_date)
        if self.dedupe and key in self._notified:
            return False

        body = f"{job.position} at {job.company} is scheduled within {self.window_hours:g} hours."
        try:
            self.notifier.show(REMINDER_TITLE, body)
        except Exception as e:
            logger.warning(f"Reminder for {job.id} could not be shown: {e}")
            return False

        if self.dedupe:
            self._notified.add(key)
        logger.debug(f"Reminder shown for {job.display_name}")
        return True

    def badge_state(self, job: Job, today: Union[datetime, date]) -> BadgeState:
        """
        Badge for the job list.

        ``UPCOMING`` when the interview is between now and the badge horizon
        (in days, fractional), otherwise ``NONE``.
        """
        if job.interview_date is None:
            return BadgeState.NONE
        diff = (job.interview_date - _as_aware(today)) / DAY
        if 0 <= diff < self.upcoming_days:
            return BadgeState.UPCOMING
        return BadgeState.NONE

    def forget(self) -> None:
        """Drop remembered reminders (only relevant with dedupe)."""
        self._notified.clear()
