# src/crew_schedule/cli/commands.py

from __future__ import annotations

import inspect
import logging
import shlex
from collections.abc import Callable
from typing import cast

from ..core.state import AppState
from ..tasks.errors import ScheduleInputError, TimeParseError
from ..tasks.task_factory import create_task

CommandEmitter = Callable[[str], None]
CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], CommandEmitter | None], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by the console (/add, /list, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(
        self,
        state: AppState,
        line: str,
        emit: CommandEmitter | None = None,
    ) -> str | None:
        """
        Handle a string like '/command "quoted arg" plain'.
        Returns a reply string or None if not a command.
        """
        if not line.startswith("/"):
            return None

        try:
            parts = shlex.split(line[1:])
        except ValueError as e:
            return f"Cannot parse command: {e}."
        if not parts:
            return "Empty command. Use /help to list available commands."

        name = parts[0].lower()
        args = parts[1:]

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 3

        try:
            if nparams >= 3:
                h3 = cast(CommandHandler3, handler)
                return h3(state, args, emit)
            h2 = cast(CommandHandler2, handler)
            return h2(state, args)
        except TimeParseError:
            return "Error: Invalid time format."
        except ScheduleInputError as e:
            return f"Error: {e}"

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def _render(lines: list[str]) -> str:
    return "\n".join(lines)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str]) -> str:
    """
    /add "<description>" HH:MM HH:MM <priority>
    """
    if len(args) != 4:
        return 'Usage: /add "<description>" HH:MM HH:MM <priority>'
    desc, start, end, priority = args
    state.registry.add_task(create_task(desc, start, end, priority))
    return ""


def cmd_remove(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /remove "<description>"'
    state.registry.remove_task(args[0])
    return ""


def cmd_edit(state: AppState, args: list[str]) -> str:
    """
    /edit "<description>" "<new description>" HH:MM HH:MM <priority>
    """
    if len(args) != 5:
        return 'Usage: /edit "<description>" "<new description>" HH:MM HH:MM <priority>'
    state.registry.edit_task(*args)
    return ""


def cmd_done(state: AppState, args: list[str]) -> str:
    if len(args) != 1:
        return 'Usage: /done "<description>"'
    state.registry.mark_completed(args[0])
    return ""


def cmd_list(state: AppState, args: list[str], emit: CommandEmitter | None = None) -> str:
    """
    /list             -> all tasks by start time
    /list <priority>  -> only tasks with that priority (case-insensitive)
    """
    lines: list[str] = []
    if args:
        state.registry.view_tasks_by_priority(" ".join(args), out=lines.append)
    else:
        state.registry.view_tasks(out=lines.append)

    if emit is not None:
        for line in lines:
            emit(line)
        return ""
    return _render(lines)


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text='Add a task: /add "<desc>" HH:MM HH:MM <priority>.')
registry.register("remove", cmd_remove, help_text='Remove a task: /remove "<desc>".', aliases=["rm"])
registry.register(
    "edit",
    cmd_edit,
    help_text='Edit a task: /edit "<desc>" "<new desc>" HH:MM HH:MM <priority>.',
)
registry.register("done", cmd_done, help_text='Mark a task completed: /done "<desc>".')
registry.register("list", cmd_list, help_text="List tasks: /list [priority].", aliases=["ls"])
