# src/crew_schedule/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import time
from enum import StrEnum


class Priority(StrEnum):
    """
    Known priority labels.

    Task.priority stays a plain string so free-text labels are accepted too;
    comparisons are case-insensitive.
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @classmethod
    def normalize(cls, raw: str | None) -> str:
        """
        Return the canonical spelling for known labels, else the stripped input.

        "high" becomes "High", so listings show the canonical label rather than
        the text the caller typed. Free-text labels are kept as given.
        """
        text = (raw or "").strip()
        for p in cls:
            if p.value.lower() == text.lower():
                return p.value
        return text


class Outcome(StrEnum):
    """Result of a registry operation (the notification carries the text)."""

    SUCCESS = "success"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass(slots=True)
class Task:
    description: str
    start: time
    end: time
    priority: str
    completed: bool = False

    def mark_completed(self) -> None:
        self.completed = True

    def overlaps(self, other: Task) -> bool:
        """Half-open [start, end) overlap: touching ranges do not overlap."""
        return self.end > other.start and self.start < other.end

    def has_priority(self, priority: str) -> bool:
        return self.priority.strip().lower() == (priority or "").strip().lower()

    def __str__(self) -> str:
        done = " (Completed)" if self.completed else ""
        return f"{self.start:%H:%M} - {self.end:%H:%M}: {self.description} [{self.priority}]{done}"
