# Storage Package
from .session_store import FileSessionStore

__all__ = ["FileSessionStore"]
