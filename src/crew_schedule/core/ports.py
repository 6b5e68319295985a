# src/crew_schedule/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The registry depends on a Protocol instead of concrete sinks, so console,
logging and test recorders are interchangeable.
"""

from collections.abc import Callable
from typing import Protocol

OutputFn = Callable[[str], None]
# Where listings are written (print by default).


class Notifier(Protocol):
    """Receives a human-readable status string for every registry event."""

    def update(self, message: str) -> None: ...
