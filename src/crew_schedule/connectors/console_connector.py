# src/crew_schedule/connectors/console_connector.py

from __future__ import annotations

import logging

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def run_console_loop(state: AppState, *, input_fn=input, out=print) -> None:
    """
    Interactive REPL over the task registry.

    Every line must be a slash command; notifications are printed by the
    registered notifiers, listings and usage hints by this loop.
    """
    logger.info("Console connector started.")
    out("[CONSOLE] Type /help for commands. Use /exit to quit.")

    while True:
        try:
            user_input = input_fn("schedule> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        try:
            with state.lock:
                reply = command_registry.handle(state, user_input, emit=out)
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

        if reply is None:
            out("Commands start with '/'. Use /help to list available commands.")
        elif reply:
            out(reply)

    logger.info("Console connector finished.")
