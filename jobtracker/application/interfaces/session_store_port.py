"""
Session Store Port - Abstract interface for persisting the user session.
"""

from abc import ABC, abstractmethod
from typing import Optional

from jobtracker.domain.value_objects import Session


class SessionStorePort(ABC):
    """Abstract interface for session persistence."""

    @abstractmethod
    def load(self) -> Optional[Session]:
        """Load the persisted session, None if there is none."""
        pass

    @abstractmethod
    def save(self, session: Session) -> None:
        """Persist the session."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the persisted session."""
        pass
