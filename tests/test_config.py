# tests/test_config.py

from __future__ import annotations

from pathlib import Path

import pytest

from crew_schedule.config import Settings

_VARS = [
    "CREW_APP_NAME",
    "CREW_LOG_LEVEL",
    "CREW_LOG_DIR",
    "CREW_LOG_TO_FILE",
    "CREW_NOTIFY_PREFIX",
    "CREW_LOG_NOTIFICATIONS",
    "CREW_DEMO_ENABLED",
    "CREW_CONSOLE_ENABLED",
]


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = Settings.from_env()
    assert s.app_name == "crew-schedule"
    assert s.log_level == "INFO"
    assert s.log_dir == Path(".local/crew")
    assert s.log_to_file is False
    assert s.notify_prefix == "Notification: "
    assert s.log_notifications is False
    assert s.demo_enabled is True
    assert s.console_enabled is False


def test_overrides(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CREW_LOG_LEVEL", "debug")
    monkeypatch.setenv("CREW_LOG_DIR", str(tmp_path))
    monkeypatch.setenv("CREW_LOG_TO_FILE", "yes")
    monkeypatch.setenv("CREW_DEMO_ENABLED", "0")
    monkeypatch.setenv("CREW_CONSOLE_ENABLED", "on")
    monkeypatch.setenv("CREW_NOTIFY_PREFIX", ">> ")
    monkeypatch.setenv("CREW_LOG_NOTIFICATIONS", "true")

    s = Settings.from_env()
    assert s.log_level == "DEBUG"
    assert s.log_dir == tmp_path
    assert s.log_to_file is True
    assert s.demo_enabled is False
    assert s.console_enabled is True
    assert s.notify_prefix == ">> "
    assert s.log_notifications is True
