"""Tests for environment-driven settings and logging set-up."""

import logging

import pytest
from pydantic import ValidationError as SettingsError

from lunches.infrastructure.config import Settings
from lunches.infrastructure.logging_config import configure_logging


class TestSettings:

    def test_reads_prefixed_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LUNCHES_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("LUNCHES_LOG_LEVEL", "info")
        monkeypatch.setenv("LUNCHES_CURRENCY", "eur")
        settings = Settings()
        assert settings.data_dir == tmp_path
        assert settings.log_level == "INFO"
        assert settings.currency == "EUR"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("LUNCHES_LOG_LEVEL", "chatty")
        with pytest.raises(SettingsError):
            Settings()


class TestConfigureLogging:

    def test_does_not_stack_handlers(self):
        logger = logging.getLogger("lunches")
        try:
            configure_logging("INFO")
            configure_logging("DEBUG")
            assert len(logger.handlers) == 1
            assert logger.level == logging.DEBUG
        finally:
            logger.handlers.clear()
            logger.setLevel(logging.NOTSET)
