"""
Notifier Port - Abstract interface for platform notifications.
"""

from abc import ABC, abstractmethod


class NotifierPort(ABC):
    """Abstract interface for the platform notification capability."""

    @abstractmethod
    def request_permission(self) -> bool:
        """Ask the platform for permission. Returns whether it was granted."""
        pass

    @abstractmethod
    def is_granted(self) -> bool:
        """Check if notifications are currently allowed."""
        pass

    @abstractmethod
    def show(self, title: str, body: str) -> None:
        """Show a notification (fire-and-forget)."""
        pass
