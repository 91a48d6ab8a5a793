"""
Session Value Object - Authenticated user session.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """
    Immutable value object for the signed-in user's session.

    The token is issued by the authentication service; this object only
    carries it to the components that need it.

    Attributes:
        token: Bearer token sent to the backend
        user_name: Display name of the signed-in user
    """

    token: str
    user_name: str = ""

    def __post_init__(self) -> None:
        """Validate session."""
        if not self.token:
            raise ValueError("token is required")

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.token}"

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {"token": self.token, "user_name": self.user_name}

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        """Create Session from dictionary."""
        return cls(token=data.get("token", ""), user_name=data.get("user_name", ""))
