# src/crew_schedule/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root": it builds a fresh TaskRegistry and
wires the console notifier (and, when enabled, a logging notifier) into
it. No module-level registry exists, so tests (and callers) can hold as
many independent instances as they like.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.notifiers import DEFAULT_PREFIX, ConsoleNotifier, LoggingNotifier
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    prefix = getattr(settings, "notify_prefix", DEFAULT_PREFIX)
    notifier = ConsoleNotifier(prefix=prefix)

    registry = TaskRegistry()
    registry.add_observer(notifier)

    # Optional audit trail of every registry event in the log.
    if getattr(settings, "log_notifications", False):
        registry.add_observer(LoggingNotifier())

    logger.debug("State created (notify_prefix=%r)", prefix)
    return AppState(settings=settings, registry=registry, notifier=notifier)
