# src/crew_schedule/tasks/errors.py

from __future__ import annotations


class ScheduleInputError(ValueError):
    """Caller supplied something the scheduler cannot turn into a task."""


class TimeParseError(ScheduleInputError):
    """A time-of-day string is not a valid 24-hour HH:MM value."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid time format: {raw!r} (expected HH:MM)")
        self.raw = raw


class InvalidTimeRangeError(ScheduleInputError):
    """Start time is not strictly before end time."""

    def __init__(self, start, end) -> None:
        super().__init__(
            f"Start time must be before end time ({start:%H:%M} >= {end:%H:%M})."
        )
        self.start = start
        self.end = end
