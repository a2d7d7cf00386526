"""
Unit tests for random source wiring and configuration.
"""
import logging

import pytest

from nanoid_web.config import Settings
from nanoid_web.dependencies.random_source import get_random_source
from nanoid_web.logging_config import setup_logging
from nanoid_web.random_source.secure import SecureRandomSource


class TestGetRandomSource:
    """Test suite for get_random_source()."""

    def test_default_is_secure(self):
        assert isinstance(get_random_source(), SecureRandomSource)

    def test_unknown_backend(self, restore_settings):
        restore_settings.NANOID_RANDOM_SOURCE = "mersenne"

        with pytest.raises(ValueError) as exc:
            get_random_source()

        assert "mersenne" in str(exc.value)


class TestSettings:
    """Test suite for Settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("NANOID_DEFAULT_SIZE", "NANOID_SHORT_SIZE", "NANOID_RANDOM_SOURCE"):
            monkeypatch.delenv(name, raising=False)

        config = Settings(_env_file=None)

        assert config.NANOID_DEFAULT_SIZE == 21
        assert config.NANOID_SHORT_SIZE == 14
        assert config.NANOID_RANDOM_SOURCE == "secure"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("NANOID_DEFAULT_SIZE", "32")

        assert Settings(_env_file=None).NANOID_DEFAULT_SIZE == 32

    def test_size_must_be_positive(self, monkeypatch):
        monkeypatch.setenv("NANOID_SHORT_SIZE", "0")

        with pytest.raises(ValueError):
            Settings(_env_file=None)

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("NANOID_LOG_LEVEL", "verbose")

        with pytest.raises(ValueError) as exc:
            Settings(_env_file=None)

        assert "NANOID_LOG_LEVEL" in str(exc.value)

    def test_log_level_override(self, monkeypatch):
        monkeypatch.setenv("NANOID_LOG_LEVEL", "DEBUG")

        assert Settings(_env_file=None).NANOID_LOG_LEVEL == "DEBUG"


class TestSetupLogging:
    """Test suite for setup_logging()."""

    def test_returns_package_logger(self):
        logger = setup_logging()

        assert logger.name == "nanoid_web"

    def test_idempotent_handlers(self):
        """Repeated setup does not stack handlers."""
        first = setup_logging()
        handler_count = len(first.handlers)

        second = setup_logging()

        assert second is first
        assert len(second.handlers) == handler_count == 1
        assert isinstance(second.handlers[0], logging.StreamHandler)
