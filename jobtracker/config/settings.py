"""
Job Tracker Configuration Module

Environment-based configuration with fail-fast validation.
All settings are loaded from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_prefix="JOBTRACKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    env: Literal["development", "production"] = Field(
        default="development",
        description="Application environment",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level",
    )
    data_dir: Path = Field(
        default=Path("./data"),
        description="Directory for runtime data (session, exports, key)",
    )

    # Backend
    api_base_url: str = Field(
        default="http://localhost:5000/api",
        description="Base URL of the job backend",
    )
    request_timeout: Optional[float] = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds (None waits indefinitely)",
    )
    api_token: Optional[str] = Field(
        default=None,
        description="Bearer token to sign in with when no session is stored",
    )
    user_name: str = Field(
        default="",
        description="Display name that goes with api_token",
    )

    # Dashboard
    page_size: int = Field(
        default=5,
        ge=1,
        le=100,
        description="Jobs shown per page",
    )

    # Reminders
    reminder_window_hours: float = Field(
        default=24.0,
        gt=0,
        description="Lookahead window for interview notifications",
    )
    upcoming_badge_days: float = Field(
        default=2.0,
        gt=0,
        description="Interviews closer than this get the upcoming badge",
    )
    dedupe_reminders: bool = Field(
        default=False,
        description="Notify at most once per interview instead of once per fetch",
    )
    notifications_enabled: bool = Field(
        default=True,
        description="Grant the in-app notification permission when requested",
    )

    # Export
    csv_filename: str = Field(default="jobs.csv")
    report_filename: str = Field(default="job_applications.pdf")
    export_dir: Optional[Path] = Field(
        default=None,
        description="Where exports are written (defaults to <data_dir>/exports)",
    )

    @field_validator("data_dir", mode="before")
    @classmethod
    def ensure_path(cls, v: str | Path) -> Path:
        """Convert string to Path."""
        return Path(v)

    @field_validator("api_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize the base URL so paths can be appended."""
        v = v.strip()
        if not v:
            raise ValueError("api_base_url must not be empty")
        return v.rstrip("/")

    def ensure_data_dir(self) -> None:
        """Create data directory if it doesn't exist."""
        self.data_dir.mkdir(parents=True, exist_ok=True)

    @property
    def exports_path(self) -> Path:
        """Directory for downloaded exports."""
        return self.export_dir or self.data_dir / "exports"

    @property
    def session_file_path(self) -> Path:
        """Path to the persisted (encrypted) session file."""
        return self.data_dir / "session.json"

    @property
    def encryption_key_path(self) -> Path:
        """Path to encryption key file."""
        return self.data_dir / ".key"


def get_settings() -> Settings:
    """
    Get validated settings instance.

    Raises:
        ValidationError: If settings are invalid.
    """
    settings = Settings()
    settings.ensure_data_dir()
    return settings
