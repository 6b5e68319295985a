# tests/test_demo.py

from __future__ import annotations

import logging

import pytest

from crew_schedule.cli import demo, main as cli_main
from crew_schedule.cli.bootstrap import create_initial_state
from crew_schedule.tasks import task_registry as tr
from crew_schedule.tasks.errors import TimeParseError
from crew_schedule.tasks.task_registry import TaskRegistry

from .fakes import RecordingNotifier

EXPECTED_OUTPUT = [
    "Notification: Task added successfully. No conflicts.",
    "Notification: Task added successfully. No conflicts.",
    "Notification: Error: Task conflicts with existing task.",
    "07:00 - 08:00: Morning Exercise [High]",
    "09:00 - 10:00: Team Meeting [Medium]",
    "Notification: Task removed successfully.",
    "09:00 - 10:00: Team Meeting [Medium]",
    "Notification: Task added successfully. No conflicts.",
    "09:00 - 10:00: Team Meeting [Medium]",
    "12:00 - 13:00: Lunch Break [Low]",
]


def test_demo_prints_expected_transcript(settings, capsys) -> None:
    state = create_initial_state(settings=settings)
    assert demo.run_demo(state.registry, state.notifier) is True

    assert capsys.readouterr().out.splitlines() == EXPECTED_OUTPUT
    assert [t.description for t in state.registry.list_tasks()] == ["Team Meeting", "Lunch Break"]


def test_demo_aborts_on_bad_time(monkeypatch) -> None:
    real_create = demo.create_task

    def flaky_create(desc, start, end, priority):
        if desc == "Training Session":
            raise TimeParseError("9h30")
        return real_create(desc, start, end, priority)

    monkeypatch.setattr(demo, "create_task", flaky_create)

    reg = TaskRegistry()
    rec = RecordingNotifier()
    reg.add_observer(rec)
    lines: list[str] = []

    assert demo.run_demo(reg, rec, out=lines.append) is False
    assert rec.messages == [tr.MSG_ADDED, tr.MSG_ADDED, "Error: Invalid time format."]
    # Remaining steps skipped: nothing was listed.
    assert lines == []
    assert len(reg) == 2


def test_main_runs_demo_and_exits_zero(settings, monkeypatch, capsys) -> None:
    settings.demo_enabled = True
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)

    assert cli_main.main() == 0
    assert capsys.readouterr().out.splitlines() == EXPECTED_OUTPUT


def test_main_runs_console_when_enabled(settings, monkeypatch) -> None:
    settings.console_enabled = True
    seen = []
    monkeypatch.setattr(cli_main, "get_settings", lambda: settings)
    monkeypatch.setattr(cli_main, "setup_logging", lambda **_: None)
    monkeypatch.setattr(cli_main, "run_console_loop", lambda state: seen.append(state))

    assert cli_main.main() == 0
    assert len(seen) == 1
    assert len(seen[0].registry) == 0


@pytest.mark.parametrize("prefix", ["Notification: ", "[crew] "])
def test_bootstrap_uses_configured_prefix(settings, capsys, prefix: str) -> None:
    settings.notify_prefix = prefix
    state = create_initial_state(settings=settings)
    state.registry.remove_task("Ghost")
    assert capsys.readouterr().out == f"{prefix}{tr.MSG_NOT_FOUND}\n"


def test_bootstrap_logs_notifications_when_enabled(settings, caplog) -> None:
    settings.log_notifications = True
    state = create_initial_state(settings=settings)

    with caplog.at_level(logging.INFO, logger="crew_schedule.notifications"):
        state.registry.remove_task("Ghost")

    logged = [r.getMessage() for r in caplog.records if r.name == "crew_schedule.notifications"]
    assert logged == [tr.MSG_NOT_FOUND]


def test_bootstrap_does_not_log_notifications_by_default(settings, caplog) -> None:
    state = create_initial_state(settings=settings)

    with caplog.at_level(logging.INFO, logger="crew_schedule.notifications"):
        state.registry.remove_task("Ghost")

    assert not [r for r in caplog.records if r.name == "crew_schedule.notifications"]
