# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from crew_schedule.core.state import AppState
from crew_schedule.tasks.notifiers import ConsoleNotifier
from crew_schedule.tasks.task_registry import TaskRegistry

from .fakes import RecordingNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState.

    A SimpleNamespace rather than the real config keeps tests independent of
    the environment.
    """
    return SimpleNamespace(
        app_name="crew-test",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
        log_to_file=False,
        notify_prefix="Notification: ",
        log_notifications=False,
        demo_enabled=False,
        console_enabled=False,
    )


@pytest.fixture()
def recorder() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture()
def registry(recorder: RecordingNotifier) -> TaskRegistry:
    reg = TaskRegistry()
    reg.add_observer(recorder)
    return reg


@pytest.fixture()
def state(settings: SimpleNamespace, registry: TaskRegistry) -> AppState:
    notifier = ConsoleNotifier(prefix=settings.notify_prefix)
    registry.add_observer(notifier)
    return AppState(settings=settings, registry=registry, notifier=notifier)
