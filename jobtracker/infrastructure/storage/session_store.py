"""
File Session Store - Persists the user session between runs.

The token is encrypted with the CryptoService before it reaches disk;
the user name is stored as plain text for the welcome header.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from jobtracker.application.interfaces import SessionStorePort
from jobtracker.domain.value_objects import Session
from jobtracker.infrastructure.security import CryptoService


logger = logging.getLogger(__name__)


class FileSessionStore(SessionStorePort):
    """
    Stores the session as JSON in a single file.

    A file that cannot be read or decrypted is treated as "no session".
    """

    def __init__(self, session_file_path: Path, crypto: CryptoService) -> None:
        """
        Initialize the store.

        Args:
            session_file_path: Path to the session file.
            crypto: Initialized crypto service for the token.
        """
        self.session_file_path = session_file_path
        self.crypto = crypto

    def has_saved_session(self) -> bool:
        """Check if there's a saved session available."""
        return self.session_file_path.exists()

    def load(self) -> Optional[Session]:
        if not self.has_saved_session():
            return None

        try:
            data = json.loads(self.session_file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Session file unreadable: {e}")
            return None

        if not isinstance(data, dict):
            logger.warning("Session file holds no session object")
            return None

        token = self.crypto.try_decrypt(str(data.get("token", "")))
        if not token:
            logger.warning("Session token could not be decrypted")
            return None
        return Session.from_dict({**data, "token": token})

    def save(self, session: Session) -> None:
        data = session.to_dict()
        data["token"] = self.crypto.encrypt(session.token)
        self.session_file_path.parent.mkdir(parents=True, exist_ok=True)
        self.session_file_path.write_text(json.dumps(data, indent=2), encoding="utf-8")

        # Restrict permissions
        try:
            self.session_file_path.chmod(0o600)
        except OSError:
            pass

    def clear(self) -> None:
        """Delete the saved session."""
        if self.session_file_path.exists():
            self.session_file_path.unlink()
