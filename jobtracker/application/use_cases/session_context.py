"""
Session Context - Explicit owner of the signed-in user's session.

Created once by the app and handed to whoever needs the token (backend
client, dashboard header). Lifecycle: ``initialize`` on load restores the
persisted session, ``teardown`` on logout forgets it.

Tokens are issued outside this application. The authentication
collaborator hands its session to ``sign_in``; during development the app
does the same with ``JOBTRACKER_API_TOKEN`` when nothing is stored.
"""

import logging
from typing import Optional

from jobtracker.application.interfaces import SessionStorePort
from jobtracker.domain.value_objects import Session


logger = logging.getLogger(__name__)


class SessionContext:
    """Holds the current session and keeps the store in sync."""

    def __init__(self, store: SessionStorePort) -> None:
        self.store = store
        self._session: Optional[Session] = None

    def initialize(self) -> Optional[Session]:
        """Restore the persisted session, if any."""
        try:
            self._session = self.store.load()
        except Exception as e:
            logger.warning(f"Stored session could not be restored: {e}")
            self._session = None
        if self._session:
            logger.info(f"Session restored for '{self._session.user_name or 'unknown user'}'")
        else:
            logger.info("No stored session, requests will be unauthenticated")
        return self._session

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def user_name(self) -> str:
        return self._session.user_name if self._session else ""

    @property
    def is_authenticated(self) -> bool:
        return self._session is not None

    def sign_in(self, session: Session) -> None:
        """Adopt a session issued by the authentication service and persist it."""
        self.store.save(session)
        self._session = session
        logger.info(f"Signed in as '{session.user_name}'")

    def teardown(self) -> None:
        """Logout: forget the session in memory and in the store."""
        self.store.clear()
        self._session = None
        logger.info("Signed out")
