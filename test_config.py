"""Tests for environment settings and structlog setup."""

import dataclasses
import json
import os

import pytest
import structlog

from auth import default_hash_password
from auth.config import Settings, load_settings
from auth.log import configure_logging

ENV_VARS = (
    "ARGON2ID_LOG_LEVEL",
    "ARGON2ID_LOG_JSON",
    "ARGON2ID_TIME",
    "ARGON2ID_MEMORY",
    "ARGON2ID_THREADS",
    "ARGON2ID_KEYLEN",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestLoadSettings:
    """Test reading settings from the environment."""

    def test_defaults(self, clean_env):
        assert load_settings(dotenv=False) == Settings()

    def test_values_from_environment(self, clean_env):
        clean_env.setenv("ARGON2ID_LOG_LEVEL", "debug")
        clean_env.setenv("ARGON2ID_LOG_JSON", "yes")
        clean_env.setenv("ARGON2ID_TIME", "3")
        clean_env.setenv("ARGON2ID_MEMORY", "2048")
        clean_env.setenv("ARGON2ID_THREADS", "2")
        clean_env.setenv("ARGON2ID_KEYLEN", "24")

        settings = load_settings(dotenv=False)

        assert settings.log_level == "DEBUG"
        assert settings.log_json is True
        assert (settings.time, settings.memory, settings.threads, settings.key_len) == (3, 2048, 2, 24)

    def test_unparseable_integer_falls_back(self, clean_env):
        clean_env.setenv("ARGON2ID_MEMORY", "lots")
        assert load_settings(dotenv=False).memory == 0

    def test_dotenv_file(self, clean_env, tmp_path):
        (tmp_path / ".env").write_text("ARGON2ID_TIME=5\n")
        clean_env.chdir(tmp_path)
        try:
            assert load_settings().time == 5
        finally:
            os.environ.pop("ARGON2ID_TIME", None)

    def test_settings_are_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            Settings().time = 2


class TestConfigureLogging:
    """Test structlog output of the hashing functions."""

    def test_json_debug_events_go_to_stderr(self, capsys, reset_structlog):
        configure_logging("DEBUG", use_json=True)
        default_hash_password("hunter2-secret")

        captured = capsys.readouterr()
        assert captured.out == ""
        events = [json.loads(line) for line in captured.err.splitlines()]
        hashed = [e for e in events if e["event"] == "password_hashed"]
        assert hashed and hashed[0]["memory"] == 65536
        assert hashed[0]["level"] == "debug"
        assert "hunter2-secret" not in captured.err

    def test_level_filters_debug(self, capsys, reset_structlog):
        configure_logging("WARNING")
        default_hash_password("pw")
        assert capsys.readouterr().err == ""

    def test_unknown_level_falls_back_to_warning(self, capsys, reset_structlog):
        configure_logging("chatty")
        default_hash_password("pw")
        assert capsys.readouterr().err == ""
