"""Tests for settings and logging setup."""

import json
import logging

import pytest
import uvicorn

from agentdesk.__main__ import main
from agentdesk.core.config import Settings, get_settings
from agentdesk.core.crypto import check_password_policy, hash_password, verify_password
from agentdesk.core.logging import JsonFormatter, setup_logging
from agentdesk.core.security import create_access_token, decode_access_token


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        """Default sections match the documented values."""
        settings = Settings(_env_file=None)
        assert settings.port == 3004
        assert settings.api_prefix == "/api"
        assert settings.views.page_size == 5
        assert settings.views.scroll_page_size == 20
        assert settings.reporting.default_window_days == 14
        assert settings.security.session_ttl_hours == 24
        assert settings.database_url.startswith("sqlite+aiosqlite")

    def test_nested_environment_overrides(self, monkeypatch) -> None:
        """Nested values are read with the double underscore delimiter."""
        monkeypatch.setenv("VIEWS__PAGE_SIZE", "10")
        monkeypatch.setenv("REPORTING__DEFAULT_WINDOW_DAYS", "30")
        monkeypatch.setenv("LOGGING__FORMAT", "json")
        settings = Settings(_env_file=None)
        assert settings.views.page_size == 10
        assert settings.reporting.default_window_days == 30
        assert settings.logging.format == "json"


class TestServerRunner:
    """Tests for the ``python -m agentdesk`` entry point."""

    def test_runs_uvicorn_with_server_settings(self, monkeypatch) -> None:
        """Host, port and reload come from the server section."""
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
        monkeypatch.setenv("SERVER__HOST", "127.0.0.1")
        monkeypatch.setenv("SERVER__PORT", "8123")
        monkeypatch.setenv("SERVER__RELOAD", "true")
        get_settings.cache_clear()
        try:
            main()
        finally:
            get_settings.cache_clear()

        app, kwargs = calls[0]
        assert app == "agentdesk.main:app"
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8123
        assert kwargs["reload"] is True


class TestLogging:
    """Tests for setup_logging and JsonFormatter."""

    def test_standard_format(self) -> None:
        """The root logger gets one stdout handler at the requested level."""
        setup_logging("DEBUG", "standard")
        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    def test_json_format(self) -> None:
        """The json format installs JsonFormatter."""
        setup_logging("INFO", "json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JsonFormatter)

    def test_json_formatter_output(self) -> None:
        """Records become JSON objects including extra fields."""
        record = logging.makeLogRecord(
            {"name": "agentdesk.test", "levelname": "INFO", "msg": "hello %s", "args": ("world",), "agent_id": "a1"}
        )
        payload = json.loads(JsonFormatter().format(record))
        assert payload["message"] == "hello world"
        assert payload["logger"] == "agentdesk.test"
        assert payload["agent_id"] == "a1"


class TestCredentials:
    """Password policy, hashing and tokens."""

    def test_password_round_trip(self) -> None:
        """A hashed password verifies and a wrong one does not."""
        hashed = hash_password("s3cret!pw")
        assert verify_password("s3cret!pw", hashed)
        assert not verify_password("other!pw", hashed)
        assert not verify_password("s3cret!pw", "not-a-hash")

    @pytest.mark.parametrize("password", ["a!b", "abcdefgh"])
    def test_password_policy_rejects(self, password) -> None:
        """Short passwords and passwords without a special character fail."""
        with pytest.raises(ValueError):
            check_password_policy(password)

    def test_access_token(self) -> None:
        """Tokens carry the user id and email."""
        token = create_access_token("user-1", "u@example.com")
        data = decode_access_token(token)
        assert data.user_id == "user-1"
        assert data.email == "u@example.com"
