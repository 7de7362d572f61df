"""Tests for configuration module."""

import pytest

from event_modeling.config import Config, LoggingConfig, load_config


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    def test_create_logging_config(self):
        config = LoggingConfig(log_level="INFO", log_format="json")

        assert config.log_level == "INFO"
        assert config.log_format == "json"

    def test_logging_config_is_immutable(self):
        config = LoggingConfig(log_level="INFO", log_format="json")

        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore

    def test_level_is_case_insensitive(self):
        config = LoggingConfig(log_level="debug", log_format="TEXT")

        assert config.log_level == "debug"

    def test_invalid_log_level(self):
        with pytest.raises(ValueError, match="log_level must be one of"):
            LoggingConfig(log_level="VERBOSE", log_format="json")

    def test_invalid_log_format(self):
        with pytest.raises(ValueError, match="log_format must be one of"):
            LoggingConfig(log_level="INFO", log_format="xml")


class TestConfig:
    """Tests for Config."""

    def test_create_config(self):
        logging = LoggingConfig(log_level="INFO", log_format="json")

        config = Config(logging=logging)

        assert config.logging is logging


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_from_env_vars(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FORMAT", "JSON")

        # Pass empty env_file to prevent loading from .env
        config = load_config(env_file="/dev/null")

        assert config.logging.log_level == "DEBUG"
        assert config.logging.log_format == "json"

    def test_load_config_with_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FORMAT", raising=False)

        config = load_config(env_file="/dev/null")

        assert config.logging.log_level == "INFO"
        assert config.logging.log_format == "text"

    def test_load_config_from_env_file(self, monkeypatch, tmp_path):
        # Register both variables with monkeypatch so values loaded from the
        # file are removed again after the test
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        monkeypatch.setenv("LOG_FORMAT", "text")
        monkeypatch.delenv("LOG_LEVEL")
        monkeypatch.delenv("LOG_FORMAT")
        env_file = tmp_path / ".env.test"
        env_file.write_text("LOG_LEVEL=WARNING\nLOG_FORMAT=json\n")

        config = load_config(env_file=str(env_file))

        assert config.logging.log_level == "WARNING"
        assert config.logging.log_format == "json"

    def test_load_config_invalid_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValueError, match="log_level must be one of"):
            load_config(env_file="/dev/null")
