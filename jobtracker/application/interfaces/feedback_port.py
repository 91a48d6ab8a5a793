"""
Feedback Port - Abstract interface for user-facing notices and confirmations.
"""

from abc import ABC, abstractmethod
from enum import Enum


class NoticeLevel(Enum):
    """Severity of a transient notice."""
    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class FeedbackPort(ABC):
    """Abstract interface for feedback shown by the dashboard view."""

    @abstractmethod
    def notice(self, message: str, level: NoticeLevel = NoticeLevel.INFO) -> None:
        """Show a non-blocking, auto-dismissing notice."""
        pass

    @abstractmethod
    async def confirm(self, message: str) -> bool:
        """Ask the user to confirm a destructive action."""
        pass
