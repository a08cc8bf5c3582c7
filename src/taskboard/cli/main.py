# src/taskboard/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, resumes the stored session (if any),
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, shutdown
from ..config import get_settings
from ..connectors.console_connector import print_notice, run_console_loop
from ..core import board
from ..core.notify import CallbackNotifier
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/taskboard")
    setup_logging(log_dir=log_dir, console_level=console_level)

    logger.info("Starting %s (transport=%s)...", settings.app_name, settings.transport)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings, notifier=CallbackNotifier(print_notice))

    try:
        # Identity first; tasks are fetched only once we know who we are.
        board.start(state)

        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.info("Console disabled; nothing else to run.")
    finally:
        shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
