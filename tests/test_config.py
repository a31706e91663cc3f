"""Test settings loading."""
from __future__ import annotations

import pytest

from govee_lights.config import Settings, load_log_level, load_settings
from govee_lights.const import ENV_API_KEY, ENV_LOG_LEVEL
from govee_lights.exceptions import GoveeConfigError


@pytest.fixture
def clean_env(monkeypatch):
    """Remove Govee variables, restoring them after values loaded from .env files."""
    for name in (ENV_API_KEY, ENV_LOG_LEVEL):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


class TestLoadSettings:
    """Test load_settings()."""

    def test_reads_environment(self, clean_env, tmp_path):
        """Test the API key is read from the environment."""
        clean_env.setenv(ENV_API_KEY, "env-key")

        settings = load_settings(tmp_path / "missing.env")

        assert settings == Settings(api_key="env-key", log_level="WARNING")

    def test_reads_env_file(self, clean_env, tmp_path):
        """Test the API key and log level are read from a .env file."""
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENV_API_KEY}=file-key\n{ENV_LOG_LEVEL}=debug\n")

        settings = load_settings(env_file)

        assert settings.api_key == "file-key"
        assert settings.log_level == "DEBUG"

    def test_environment_wins_over_file(self, clean_env, tmp_path):
        """Test an exported variable is not overridden by the file."""
        clean_env.setenv(ENV_API_KEY, "env-key")
        env_file = tmp_path / ".env"
        env_file.write_text(f"{ENV_API_KEY}=file-key\n")

        assert load_settings(env_file).api_key == "env-key"

    def test_missing_key(self, clean_env, tmp_path):
        """Test a missing key is a configuration error."""
        env_file = tmp_path / ".env"
        env_file.write_text("OTHER=1\n")

        with pytest.raises(GoveeConfigError, match=ENV_API_KEY):
            load_settings(env_file)

    def test_blank_key(self, clean_env, tmp_path):
        """Test a blank key is a configuration error."""
        clean_env.setenv(ENV_API_KEY, "   ")

        with pytest.raises(GoveeConfigError):
            load_settings(tmp_path / "missing.env")


class TestLoadLogLevel:
    """Test load_log_level()."""

    def test_default(self, clean_env, tmp_path):
        """Test the default log level."""
        assert load_log_level(tmp_path / "missing.env") == "WARNING"

    def test_does_not_need_api_key(self, clean_env, tmp_path):
        """Test the log level loads without an API key."""
        clean_env.setenv(ENV_LOG_LEVEL, "info")

        assert load_log_level(tmp_path / "missing.env") == "INFO"
