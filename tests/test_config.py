"""
Configuration tests for DesignDesk.
"""

import logging
import pytest

from designdesk.config import (
    DEFAULT_AUTOSAVE_DELAY,
    DEFAULT_DATA_DIR,
    DEFAULT_NOTIFICATION_CAP,
    DEFAULT_STORAGE_KEY,
    Config,
    load_config,
    setup_logging,
)


ENV_VARS = (
    "DESIGNDESK_DATA_DIR",
    "DESIGNDESK_STORAGE_KEY",
    "DESIGNDESK_LANGUAGE",
    "DESIGNDESK_AUTOSAVE_DELAY",
    "DESIGNDESK_NOTIFICATION_CAP",
    "DESIGNDESK_LOG_LEVEL",
)


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Clean DESIGNDESK_* environment; values loaded from .env are undone too."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return tmp_path / ".env"


class TestLoadConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, env):
        config = load_config(env)
        assert config == Config()
        assert config.data_dir == DEFAULT_DATA_DIR
        assert config.storage_key == DEFAULT_STORAGE_KEY
        assert config.language == "uk"
        assert config.autosave_delay == DEFAULT_AUTOSAVE_DELAY
        assert config.notification_cap == DEFAULT_NOTIFICATION_CAP

    def test_environment_overrides(self, env, monkeypatch, tmp_path):
        monkeypatch.setenv("DESIGNDESK_DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("DESIGNDESK_LANGUAGE", "en")
        monkeypatch.setenv("DESIGNDESK_AUTOSAVE_DELAY", "0.5")
        monkeypatch.setenv("DESIGNDESK_NOTIFICATION_CAP", "10")
        monkeypatch.setenv("DESIGNDESK_LOG_LEVEL", "debug")
        config = load_config(env)
        assert config.data_dir == tmp_path / "data"
        assert config.storage_path == tmp_path / "data" / "storage.db"
        assert config.language == "en"
        assert config.autosave_delay == 0.5
        assert config.notification_cap == 10
        assert config.log_level == "DEBUG"

    def test_env_file(self, env):
        env.write_text("DESIGNDESK_STORAGE_KEY=from-file\n", encoding="utf-8")
        assert load_config(env).storage_key == "from-file"

    def test_environment_beats_env_file(self, env, monkeypatch):
        env.write_text("DESIGNDESK_STORAGE_KEY=from-file\n", encoding="utf-8")
        monkeypatch.setenv("DESIGNDESK_STORAGE_KEY", "from-env")
        assert load_config(env).storage_key == "from-env"

    def test_invalid_language(self, env, monkeypatch):
        monkeypatch.setenv("DESIGNDESK_LANGUAGE", "de")
        with pytest.raises(ValueError):
            load_config(env)

    def test_invalid_number(self, env, monkeypatch):
        monkeypatch.setenv("DESIGNDESK_NOTIFICATION_CAP", "many")
        with pytest.raises(ValueError):
            load_config(env)

    def test_setup_logging(self, env):
        setup_logging(Config(log_level="WARNING"))
        assert logging.getLogger("designdesk").getEffectiveLevel() <= logging.WARNING
