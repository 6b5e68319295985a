# src/crew_schedule/cli/demo.py

"""
Scripted walkthrough of the scheduler.

Adds a few tasks (one of them clashing), lists, removes, adds again and
lists once more. A bad time string stops the remaining steps and is
reported through the notifier.
"""

from __future__ import annotations

import logging

from ..core.ports import Notifier, OutputFn
from ..tasks.errors import ScheduleInputError, TimeParseError
from ..tasks.task_factory import create_task
from ..tasks.task_registry import TaskRegistry

logger = logging.getLogger(__name__)


def run_demo(registry: TaskRegistry, notifier: Notifier, out: OutputFn = print) -> bool:
    """Run the scripted sequence. Returns False if it was cut short by bad input."""
    try:
        registry.add_task(create_task("Morning Exercise", "07:00", "08:00", "High"))
        registry.add_task(create_task("Team Meeting", "09:00", "10:00", "Medium"))
        # Overlaps Team Meeting, rejected.
        registry.add_task(create_task("Training Session", "09:30", "10:30", "High"))

        registry.view_tasks(out=out)

        registry.remove_task("Morning Exercise")
        registry.view_tasks(out=out)

        registry.add_task(create_task("Lunch Break", "12:00", "13:00", "Low"))
        registry.view_tasks(out=out)
    except TimeParseError:
        logger.warning("Demo aborted: bad time string", exc_info=True)
        notifier.update("Error: Invalid time format.")
        return False
    except ScheduleInputError as e:
        logger.warning("Demo aborted: %s", e)
        notifier.update(f"Error: {e}")
        return False
    return True
