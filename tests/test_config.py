"""Tests for environment-driven settings and the error taxonomy."""

from onenight.config import Settings
from onenight.exceptions import (
    ConfigurationError,
    InvalidTargetError,
    OracleError,
    OracleTimeoutError,
    SessionCompletedError,
    SessionNotFoundError,
)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ONENIGHT_DISCUSSION_ROUNDS", raising=False)
        monkeypatch.delenv("ONENIGHT_ORACLE_TIMEOUT_SECONDS", raising=False)
        settings = Settings(_env_file=None)
        assert settings.discussion_rounds == 3
        assert settings.oracle_timeout_seconds == 60.0

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("ONENIGHT_DISCUSSION_ROUNDS", "2")
        monkeypatch.setenv("ONENIGHT_ORACLE_MODEL", "gpt-test")
        settings = Settings(_env_file=None)
        assert settings.discussion_rounds == 2
        assert settings.oracle_model == "gpt-test"

    def test_empty_env_ignored(self, monkeypatch):
        monkeypatch.setenv("ONENIGHT_DISCUSSION_ROUNDS", "")
        assert Settings(_env_file=None).discussion_rounds == 3


class TestErrors:
    """Tests for the error taxonomy."""

    def test_retryable_flags(self):
        assert OracleError("x").retryable
        assert OracleTimeoutError(5).retryable
        assert not SessionNotFoundError("g").retryable
        assert not SessionCompletedError("g").retryable
        assert not InvalidTargetError("x").retryable
        assert not ConfigurationError("x").retryable

    def test_to_dict(self):
        assert SessionNotFoundError("abc").to_dict() == {
            "error": "SessionNotFoundError",
            "message": "Game 'abc' not found",
            "retryable": False,
        }

    def test_timeout_message(self):
        assert "2.5s" in OracleTimeoutError(2.5).message
