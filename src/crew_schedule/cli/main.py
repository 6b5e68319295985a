# src/crew_schedule/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, runs the scripted demo and then,
optionally, the interactive console.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..cli.demo import run_demo
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    log_dir = settings.log_dir if settings.log_to_file else None
    setup_logging(console_level=console_level, log_dir=log_dir)

    logger.info("Starting %s...", settings.app_name)

    # Fresh, explicitly owned registry (no process-wide singleton).
    state = create_initial_state(settings=settings)

    if settings.demo_enabled:
        run_demo(state.registry, state.notifier)

    if settings.console_enabled:
        run_console_loop(state)

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
