# src/priotask/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, starts the advisory background loop,
then runs the console REPL in the main thread.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..connectors.advisory_runner import start_advisory_runner
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from .bootstrap import create_initial_state

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("openai").setLevel(logging.WARNING)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    state.advisory_runner = start_advisory_runner()

    try:
        run_console_loop(state)
    finally:
        runner = state.advisory_runner
        if runner is not None:
            runner.stop()
            runner.join(timeout=5.0)
        # Tasks are in-memory only; nothing to save.
        logger.info("Bye.")


if __name__ == "__main__":
    main()
