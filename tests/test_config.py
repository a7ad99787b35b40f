"""Tests for environment-driven configuration."""

import logging
import os

import pytest

from daily_floor.config import configure_logging, get_settings
from daily_floor.errors import ConfigError


def test_defaults():
    settings = get_settings()
    assert settings.timezone is None
    assert settings.seed is None
    assert settings.log_level == "WARNING"
    assert settings.get_tzinfo() is None


def test_values_from_environment(monkeypatch):
    monkeypatch.setenv("DAILY_FLOOR_TIMEZONE", "Europe/Berlin")
    monkeypatch.setenv("DAILY_FLOOR_SEED", "11")
    monkeypatch.setenv("DAILY_FLOOR_LOG_LEVEL", "debug")
    settings = get_settings()
    assert settings.timezone == "Europe/Berlin"
    assert settings.seed == 11
    assert settings.log_level == "DEBUG"
    assert str(settings.get_tzinfo()) == "Europe/Berlin"


def test_seeded_rng_is_deterministic(monkeypatch):
    monkeypatch.setenv("DAILY_FLOOR_SEED", "5")
    settings = get_settings()
    assert settings.get_rng().random() == settings.get_rng().random()


def test_env_file_is_loaded(tmp_path, monkeypatch):
    monkeypatch.setattr(os, "environ", dict(os.environ))
    env_file = tmp_path / ".env"
    env_file.write_text("DAILY_FLOOR_SEED=21\n")
    settings = get_settings(str(env_file))
    assert settings.seed == 21


@pytest.mark.parametrize(
    "name,value",
    [
        ("DAILY_FLOOR_SEED", "abc"),
        ("DAILY_FLOOR_TIMEZONE", "Mars/Olympus_Mons"),
        ("DAILY_FLOOR_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ConfigError):
        get_settings()


def test_configure_logging(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    monkeypatch.setenv("DAILY_FLOOR_LOG_LEVEL", "INFO")
    configure_logging()
    assert calls["level"] == "INFO"
    assert "%(levelname)s" in calls["format"]
