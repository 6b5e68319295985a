# src/crew_schedule/tasks/notifiers.py

from __future__ import annotations

import logging
import sys
from typing import TextIO

DEFAULT_PREFIX = "Notification: "


class ConsoleNotifier:
    """Print every notification to stdout with a fixed label."""

    def __init__(self, prefix: str = DEFAULT_PREFIX, stream: TextIO | None = None) -> None:
        self.prefix = prefix
        self._stream = stream

    def update(self, message: str) -> None:
        # Resolve sys.stdout lazily so redirected/captured stdout is honored.
        stream = self._stream if self._stream is not None else sys.stdout
        print(f"{self.prefix}{message}", file=stream, flush=True)


class LoggingNotifier:
    """Forward notifications into logging (useful when the console is busy)."""

    def __init__(self, logger_name: str = "crew_schedule.notifications", level: int = logging.INFO) -> None:
        self._logger = logging.getLogger(logger_name)
        self._level = level

    def update(self, message: str) -> None:
        self._logger.log(self._level, "%s", message)
