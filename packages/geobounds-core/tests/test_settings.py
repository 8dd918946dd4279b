"""Tests for environment-driven settings and logging setup."""

import logging

from geobounds_core.config.logging import configure_logging
from geobounds_core.config.settings import Settings, get_settings


def test_defaults():
    settings = Settings()
    assert settings.log_level == "WARNING"
    assert "%(message)s" in settings.log_format


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("GEOBOUNDS_LOG_LEVEL", "DEBUG")
    assert Settings().log_level == "DEBUG"


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_configure_logging_sets_named_logger_level():
    logger = configure_logging("info", "geobounds.test")
    assert logger.name == "geobounds.test"
    assert logger.level == logging.INFO


def test_configure_logging_unknown_level_falls_back_to_warning():
    logger = configure_logging("loud", "geobounds.test.unknown")
    assert logger.level == logging.WARNING
