"""Tests for settings, logging setup and the exception hierarchy."""

import logging

import pytest
from pydantic import ValidationError as SettingsError

from cyrcipher.core.config import Settings
from cyrcipher.core.exceptions import (
    CipherError,
    CipherLabError,
    EngineNotFoundError,
    ErrorKind,
    InvalidKeyError,
    InvalidTextError,
    TextTooLongError,
    ValidationError,
)
from cyrcipher.core.logging import LOGGER_NAME, configure_logging


class TestSettings:

    def test_defaults(self, monkeypatch):
        for name in ("MAX_TEXT_LENGTH", "APP_ENV", "API_V1_PREFIX"):
            monkeypatch.delenv(name, raising=False)
        settings = Settings(_env_file=None)

        assert settings.api_v1_prefix == "/api/v1"
        assert settings.max_text_length == 100_000
        assert settings.is_development

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "50")
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        settings = Settings(_env_file=None)

        assert settings.max_text_length == 50
        assert settings.is_production
        assert settings.log_level == "DEBUG"

    def test_invalid_limit(self, monkeypatch):
        monkeypatch.setenv("MAX_TEXT_LENGTH", "0")

        with pytest.raises(SettingsError):
            Settings(_env_file=None)


class TestConfigureLogging:

    def test_single_handler(self):
        logger = configure_logging("DEBUG")
        handlers = len(logger.handlers)

        configure_logging("WARNING")

        assert logger.name == LOGGER_NAME
        assert len(logger.handlers) == handlers
        assert logger.level == logging.WARNING


class TestExceptions:

    def test_kinds(self):
        assert InvalidKeyError("bad").kind == ErrorKind.INVALID_KEY
        assert InvalidTextError("bad").kind == ErrorKind.INVALID_TEXT

    def test_hierarchy(self):
        error = InvalidTextError("empty")

        assert isinstance(error, CipherError)
        assert isinstance(error, ValidationError)
        assert isinstance(error, ValueError)
        assert isinstance(error, CipherLabError)
        assert not isinstance(EngineNotFoundError("x"), ValidationError)

    def test_details_carry_kind(self):
        error = InvalidKeyError("bad", {"key": 0})

        assert error.details == {"key": 0, "kind": "invalid_key"}
        assert str(error) == "bad"

    def test_details_are_copied(self):
        details = {"key": 0}
        error = InvalidKeyError("bad", details)

        assert details == {"key": 0}
        assert error.details is not details

    def test_text_too_long(self):
        error = TextTooLongError(12, 10)

        assert error.details == {"length": 12, "max_length": 10}
        assert "12" in error.message
