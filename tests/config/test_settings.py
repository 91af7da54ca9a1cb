"""Tests for src/config - settings loading and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from src.config.logging_config import configure_logging
from src.config.settings import Settings, get_settings


@pytest.fixture
def clean_logger():
    root = logging.getLogger("src")
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("PIG_LOG_LEVEL", "PIG_DEBUG", "PIG_COMPUTER_STEP_DELAY", "PIG_COMPUTER_NAME"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.log_level == "INFO"
        assert settings.debug is False
        assert settings.computer_name == "Computer"
        assert settings.player_one_name == "Player 1"
        assert settings.player_two_name == "Player 2"
        assert settings.computer_step_delay == 0.7

    def test_env_prefix(self, monkeypatch):
        monkeypatch.setenv("PIG_COMPUTER_NAME", "HAL")
        monkeypatch.setenv("PIG_COMPUTER_STEP_DELAY", "0.1")
        settings = Settings(_env_file=None)
        assert settings.computer_name == "HAL"
        assert settings.computer_step_delay == 0.1

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, computer_step_delay=-1)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, computer_name="")

    def test_get_settings_is_cached(self):
        get_settings.cache_clear()
        try:
            assert get_settings() is get_settings()
        finally:
            get_settings.cache_clear()


class TestConfigureLogging:
    def test_sets_level(self, clean_logger):
        configure_logging(Settings(_env_file=None, log_level="warning"))
        assert clean_logger.level == logging.WARNING

    def test_debug_overrides_level(self, clean_logger):
        configure_logging(Settings(_env_file=None, log_level="ERROR", debug=True))
        assert clean_logger.level == logging.DEBUG

    def test_handler_added_once(self, clean_logger):
        settings = Settings(_env_file=None)
        configure_logging(settings)
        configure_logging(settings)
        names = [h.get_name() for h in clean_logger.handlers]
        assert names.count("pig-dice") == 1

    def test_unknown_level(self, clean_logger):
        with pytest.raises(ValueError, match="Unknown log level"):
            configure_logging(Settings(_env_file=None, log_level="LOUD"))
