# src/crew_schedule/core/state.py

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..tasks.notifiers import ConsoleNotifier
from ..tasks.task_registry import TaskRegistry


@dataclass
class AppState:
    # Settings (or a SimpleNamespace in tests) for easy access in other modules.
    settings: Any

    registry: TaskRegistry
    notifier: ConsoleNotifier

    # Serializes command handling when the registry is driven from more than one place.
    lock: threading.Lock = field(default_factory=threading.Lock)
