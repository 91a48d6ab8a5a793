# Use Cases Package
from .job_store import JobStore, MutationState
from .reminder_scheduler import BadgeState, ReminderScheduler
from .session_context import SessionContext

__all__ = [
    "BadgeState",
    "JobStore",
    "MutationState",
    "ReminderScheduler",
    "SessionContext",
]
