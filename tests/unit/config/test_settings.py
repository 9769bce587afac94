"""Unit tests for application settings."""

import pytest
from pydantic import ValidationError

from ibanscope_config import Settings, clear_settings_cache, get_settings


class TestSettings:
    """Tests for Settings loading."""

    def test_defaults(self):
        settings = Settings(_env_file=None)

        assert settings.app_name == "ibanscope"
        assert settings.log_level == "WARNING"
        assert settings.output_format == "table"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("IBANSCOPE_LOG_LEVEL", "debug")
        monkeypatch.setenv("IBANSCOPE_OUTPUT_FORMAT", "json")

        settings = Settings(_env_file=None)

        assert settings.log_level == "DEBUG"
        assert settings.output_format == "json"

    def test_rejects_unknown_log_level(self, monkeypatch):
        monkeypatch.setenv("IBANSCOPE_LOG_LEVEL", "chatty")

        with pytest.raises(ValidationError, match="Unknown log level"):
            Settings(_env_file=None)

    def test_rejects_unknown_output_format(self, monkeypatch):
        monkeypatch.setenv("IBANSCOPE_OUTPUT_FORMAT", "xml")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    def test_reads_env_file(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("IBANSCOPE_LOG_LEVEL=error\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.log_level == "ERROR"


class TestGetSettings:
    """Tests for the settings cache."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear_cache(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("IBANSCOPE_OUTPUT_FORMAT", "json")
        clear_settings_cache()

        second = get_settings()

        assert second is not first
        assert second.output_format == "json"
