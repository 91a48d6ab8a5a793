"""
Unit tests for settings, session persistence and the session context.
"""

import json

import pytest
from pydantic import ValidationError

from jobtracker.application.use_cases import SessionContext
from jobtracker.config.settings import Settings
from jobtracker.domain.value_objects import Session
from jobtracker.infrastructure.security import CryptoService
from jobtracker.infrastructure.storage import FileSessionStore
from jobtracker.presentation.gui.app import create_session


@pytest.fixture
def crypto(settings):
    service = CryptoService(settings.encryption_key_path)
    service.initialize()
    return service


@pytest.fixture
def store(settings, crypto):
    return FileSessionStore(settings.session_file_path, crypto)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, tmp_path):
        """Should provide dashboard defaults."""
        settings = Settings(data_dir=tmp_path)

        assert settings.page_size == 5
        assert settings.reminder_window_hours == 24.0
        assert settings.request_timeout is None
        assert settings.exports_path == tmp_path / "exports"

    def test_base_url_trailing_slash(self, tmp_path):
        """Should strip the trailing slash from the base URL."""
        settings = Settings(data_dir=tmp_path, api_base_url="http://host/api/")
        assert settings.api_base_url == "http://host/api"

    def test_invalid_page_size(self, tmp_path):
        """Should fail fast on an invalid page size."""
        with pytest.raises(ValidationError):
            Settings(data_dir=tmp_path, page_size=0)

    def test_env_prefix(self, tmp_path, monkeypatch):
        """Should read JOBTRACKER_ environment variables."""
        monkeypatch.setenv("JOBTRACKER_PAGE_SIZE", "10")
        assert Settings(data_dir=tmp_path).page_size == 10


class TestCryptoService:
    """Tests for CryptoService."""

    def test_round_trip(self, crypto):
        """Should decrypt what it encrypted."""
        encrypted = crypto.encrypt("secret")

        assert encrypted != "secret"
        assert crypto.decrypt(encrypted) == "secret"

    def test_key_is_reused(self, settings, crypto):
        """Should load the existing key on the next run."""
        encrypted = crypto.encrypt("secret")
        again = CryptoService(settings.encryption_key_path)
        again.initialize()

        assert again.decrypt(encrypted) == "secret"

    def test_wrong_data(self, crypto):
        """Should return None for data it cannot decrypt."""
        assert crypto.try_decrypt("not-a-token") is None

    def test_requires_initialize(self, tmp_path):
        """Should raise before initialize()."""
        with pytest.raises(RuntimeError, match="not initialized"):
            CryptoService(tmp_path / ".key").encrypt("x")


class TestFileSessionStore:
    """Tests for FileSessionStore."""

    def test_save_and_load(self, store):
        """Should restore the saved session."""
        store.save(Session(token="tok-123", user_name="Sam"))
        assert store.load() == Session(token="tok-123", user_name="Sam")

    def test_token_encrypted_on_disk(self, store, settings):
        """Should never write the token in plain text."""
        store.save(Session(token="tok-123", user_name="Sam"))
        data = json.loads(settings.session_file_path.read_text(encoding="utf-8"))

        assert data["token"] != "tok-123"
        assert data["user_name"] == "Sam"

    def test_missing_file(self, store):
        """Should load nothing without a file."""
        assert store.has_saved_session() is False
        assert store.load() is None

    def test_corrupted_file(self, store, settings):
        """Should treat an unreadable file as no session."""
        settings.session_file_path.parent.mkdir(parents=True, exist_ok=True)
        settings.session_file_path.write_text("{broken", encoding="utf-8")

        assert store.load() is None

    def test_non_object_file(self, store, settings):
        """Should treat a file without a session object as no session."""
        settings.session_file_path.parent.mkdir(parents=True, exist_ok=True)
        settings.session_file_path.write_text("[1, 2]", encoding="utf-8")

        assert store.load() is None

    def test_clear(self, store):
        """Should delete the saved session."""
        store.save(Session(token="tok-123"))
        store.clear()

        assert store.has_saved_session() is False


class TestSessionContext:
    """Tests for SessionContext."""

    def test_initialize_restores(self, store):
        """Should restore the persisted session."""
        store.save(Session(token="tok-123", user_name="Sam"))
        context = SessionContext(store)
        context.initialize()

        assert context.is_authenticated is True
        assert context.session.token == "tok-123"
        assert context.user_name == "Sam"

    def test_initialize_without_session(self, store):
        """Should start unauthenticated."""
        context = SessionContext(store)
        assert context.initialize() is None
        assert context.session is None
        assert context.user_name == ""

    def test_sign_in_persists(self, store):
        """Should save the adopted session."""
        context = SessionContext(store)
        context.initialize()
        context.sign_in(Session(token="tok-456", user_name="Alex"))

        assert store.load().token == "tok-456"

    def test_teardown(self, store):
        """Should forget the session in memory and on disk."""
        store.save(Session(token="tok-123"))
        context = SessionContext(store)
        context.initialize()

        context.teardown()

        assert context.is_authenticated is False
        assert store.load() is None


class TestCreateSession:
    """Tests for building the app's session context."""

    def test_unauthenticated_without_token(self, settings):
        """Should start signed out when nothing is stored or configured."""
        context = create_session(settings)
        assert context.is_authenticated is False

    def test_configured_token_signs_in(self, settings):
        """Should sign in with the configured token and persist it."""
        settings = settings.model_copy(update={"api_token": "dev-token", "user_name": "Sam"})
        context = create_session(settings)

        assert context.session == Session(token="dev-token", user_name="Sam")
        assert create_session(settings.model_copy(update={"api_token": None})).session.token == "dev-token"

    def test_stored_session_wins(self, settings, store):
        """Should keep a stored session over the configured token."""
        store.save(Session(token="stored", user_name="Alex"))
        settings = settings.model_copy(update={"api_token": "dev-token"})

        assert create_session(settings).session.token == "stored"
