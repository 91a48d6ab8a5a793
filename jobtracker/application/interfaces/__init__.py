# Interfaces Package
from .feedback_port import FeedbackPort, NoticeLevel
from .job_backend_port import BackendError, JobBackendPort
from .notifier_port import NotifierPort
from .session_store_port import SessionStorePort

__all__ = [
    "BackendError",
    "FeedbackPort",
    "JobBackendPort",
    "NoticeLevel",
    "NotifierPort",
    "SessionStorePort",
]
