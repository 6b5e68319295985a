# src/crew_schedule/tasks/task_registry.py

from __future__ import annotations

"""
In-memory task registry.

Holds an insertion-ordered list of tasks and enforces one rule: no two tasks
have overlapping [start, end) ranges. Every mutating call reports its result
to all registered notifiers and returns an Outcome.

Lookups are by description, first match in insertion order. Listings are
sorted copies; the stored order is never changed.

Thread-safety:
- every mutate-then-notify sequence runs under a single re-entrant lock
"""

import logging
import threading
from collections.abc import Iterator

from ..core.ports import Notifier, OutputFn
from .errors import ScheduleInputError
from .task_factory import parse_range
from .task_models import Outcome, Priority, Task

logger = logging.getLogger(__name__)

MSG_ADDED = "Task added successfully. No conflicts."
MSG_CONFLICT = "Error: Task conflicts with existing task."
MSG_REMOVED = "Task removed successfully."
MSG_EDITED = "Task edited successfully."
MSG_EDIT_CONFLICT = "Error: Edited task conflicts with existing task."
MSG_COMPLETED = "Task marked as completed."
MSG_NOT_FOUND = "Error: Task not found."
MSG_EMPTY = "No tasks scheduled for the day."


class TaskRegistry:
    def __init__(self) -> None:
        self._tasks: list[Task] = []
        self._observers: list[Notifier] = []
        self._lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    # ---- observers ----

    def add_observer(self, observer: Notifier) -> None:
        """Register a notifier. Registering the same one twice doubles its notifications."""
        with self._lock:
            self._observers.append(observer)

    def remove_observer(self, observer: Notifier) -> None:
        with self._lock:
            try:
                self._observers.remove(observer)
            except ValueError:
                logger.debug("remove_observer: %r was not registered", observer)

    def _notify(self, message: str) -> None:
        for observer in list(self._observers):
            observer.update(message)

    # ---- lookups ----

    def find_task(self, description: str) -> Task | None:
        for task in self._tasks:
            if task.description == description:
                return task
        return None

    def conflicts_for(self, candidate: Task, *, ignore: Task | None = None) -> list[Task]:
        """Existing tasks whose range overlaps candidate (ignore is matched by identity)."""
        return [t for t in self._tasks if t is not ignore and t.overlaps(candidate)]

    # ---- mutations ----

    def add_task(self, task: Task) -> Outcome:
        with self._lock:
            clashes = self.conflicts_for(task)
            if clashes:
                logger.info(
                    "Rejected task %r: overlaps %s",
                    task.description,
                    ", ".join(repr(t.description) for t in clashes),
                )
                self._notify(MSG_CONFLICT)
                return Outcome.CONFLICT

            self._tasks.append(task)
            logger.debug("Task added %r %s-%s total=%d", task.description, task.start, task.end, len(self._tasks))
            self._notify(MSG_ADDED)
            return Outcome.SUCCESS

    def remove_task(self, description: str) -> Outcome:
        with self._lock:
            task = self.find_task(description)
            if task is None:
                self._notify(MSG_NOT_FOUND)
                return Outcome.NOT_FOUND

            # Remove by identity: equal-valued duplicates must not be confused.
            idx = next(i for i, t in enumerate(self._tasks) if t is task)
            del self._tasks[idx]
            logger.debug("Task removed %r total=%d", description, len(self._tasks))
            self._notify(MSG_REMOVED)
            return Outcome.SUCCESS

    def edit_task(
        self,
        description: str,
        new_description: str,
        new_start: str,
        new_end: str,
        new_priority: str,
    ) -> Outcome:
        """
        Overwrite the first task named `description`.

        Time strings are parsed before anything else, so a ScheduleInputError
        leaves the registry untouched. The new range is checked against every
        other task; a clash rejects the edit.
        """
        start, end = parse_range(new_start, new_end)
        new_description = (new_description or "").strip()
        if not new_description:
            raise ScheduleInputError("description is required")
        new_priority = Priority.normalize(new_priority)

        with self._lock:
            task = self.find_task(description)
            if task is None:
                self._notify(MSG_NOT_FOUND)
                return Outcome.NOT_FOUND

            probe = Task(description=new_description, start=start, end=end, priority=new_priority)
            if self.conflicts_for(probe, ignore=task):
                logger.info("Rejected edit of %r: new range %s-%s overlaps", description, start, end)
                self._notify(MSG_EDIT_CONFLICT)
                return Outcome.CONFLICT

            task.description = new_description
            task.start = start
            task.end = end
            task.priority = new_priority
            logger.debug("Task edited %r -> %r", description, new_description)
            self._notify(MSG_EDITED)
            return Outcome.SUCCESS

    def mark_completed(self, description: str) -> Outcome:
        with self._lock:
            task = self.find_task(description)
            if task is None:
                self._notify(MSG_NOT_FOUND)
                return Outcome.NOT_FOUND

            task.mark_completed()
            self._notify(MSG_COMPLETED)
            return Outcome.SUCCESS

    # ---- listings ----

    def list_tasks(self) -> list[Task]:
        with self._lock:
            return sorted(self._tasks, key=lambda t: t.start)

    def list_by_priority(self, priority: str) -> list[Task]:
        with self._lock:
            return sorted((t for t in self._tasks if t.has_priority(priority)), key=lambda t: t.start)

    def view_tasks(self, out: OutputFn = print) -> None:
        tasks = self.list_tasks()
        if not tasks:
            out(MSG_EMPTY)
            return
        for task in tasks:
            out(str(task))

    def view_tasks_by_priority(self, priority: str, out: OutputFn = print) -> None:
        tasks = self.list_by_priority(priority)
        if not tasks:
            out(f"No tasks with the priority {priority} scheduled for the day.")
            return
        for task in tasks:
            out(str(task))
