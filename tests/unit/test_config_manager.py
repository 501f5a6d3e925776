# File: tests/unit/test_config_manager.py
"""
Unit tests for environment-backed configuration.
"""

from booking_calendar.core.config_manager import Config, _env_int
from booking_calendar.models import CalendarSettings


def test_env_int_reads_environment(monkeypatch):
    monkeypatch.setenv("CALENDAR_TIME_START", "7")

    assert _env_int("CALENDAR_TIME_START", 8) == 7


def test_env_int_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("CALENDAR_TIME_START", "seven")

    assert _env_int("CALENDAR_TIME_START", 8) == 8


def test_env_int_missing(monkeypatch):
    monkeypatch.delenv("CALENDAR_TIME_START", raising=False)

    assert _env_int("CALENDAR_TIME_START", 8) == 8


def test_grid_constants():
    assert Config.GRID_COLUMNS == 8
    assert Config.OVERLAP_SHRINK == 0.9
    assert len(Config.ROOM_COLORS) == 10


def test_validate_accepts_defaults(monkeypatch):
    monkeypatch.setattr(Config, "TIME_START", 8)
    monkeypatch.setattr(Config, "TIME_END", 20)
    monkeypatch.setattr(Config, "TIMEZONE", "UTC")

    assert Config.validate() is True


def test_validate_rejects_bad_hours(monkeypatch):
    monkeypatch.setattr(Config, "TIME_START", 25)

    assert Config.validate() is False


def test_validate_rejects_inverted_hours(monkeypatch):
    monkeypatch.setattr(Config, "TIME_START", 18)
    monkeypatch.setattr(Config, "TIME_END", 9)

    assert Config.validate() is False


def test_validate_rejects_unknown_timezone(monkeypatch):
    monkeypatch.setattr(Config, "TIMEZONE", "Nowhere/Special")

    assert Config.validate() is False


def test_settings_from_config(monkeypatch):
    monkeypatch.setattr(Config, "TIME_START", 7)
    monkeypatch.setattr(Config, "TIME_END", 19)
    monkeypatch.setattr(Config, "TIMEZONE", "Europe/Riga")

    settings = CalendarSettings.from_config()

    assert (settings.time_start, settings.time_end) == (7, 19)
    assert settings.timezone == "Europe/Riga"
