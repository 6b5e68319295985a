# src/crew_schedule/tasks/task_factory.py

"""
Build Task values from user-facing strings.

Times are 24-hour "HH:MM" (no seconds, no timezone). Every failure raises a
ScheduleInputError subclass; the registry never catches these.
"""

from __future__ import annotations

import re
from datetime import time

from .errors import InvalidTimeRangeError, ScheduleInputError, TimeParseError
from .task_models import Priority, Task

_HHMM = re.compile(r"^(\d{2}):(\d{2})$", re.ASCII)


def parse_time(raw: str) -> time:
    text = (raw or "").strip()
    m = _HHMM.match(text)
    if not m:
        raise TimeParseError(raw)
    hour, minute = int(m.group(1)), int(m.group(2))
    if hour > 23 or minute > 59:
        raise TimeParseError(raw)
    return time(hour, minute)


def parse_range(start: str, end: str) -> tuple[time, time]:
    """Parse both ends and require start < end."""
    start_t = parse_time(start)
    end_t = parse_time(end)
    if start_t >= end_t:
        raise InvalidTimeRangeError(start_t, end_t)
    return start_t, end_t


def create_task(description: str, start: str, end: str, priority: str) -> Task:
    desc = (description or "").strip()
    if not desc:
        raise ScheduleInputError("description is required")
    start_t, end_t = parse_range(start, end)
    return Task(
        description=desc,
        start=start_t,
        end=end_t,
        priority=Priority.normalize(priority),
    )
