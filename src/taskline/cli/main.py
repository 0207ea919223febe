# src/taskline/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading the tasks file once),
runs the console REPL, then flushes the task list on the way out.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, flush_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    file_level = getattr(logging, level_name, logging.INFO)

    # Console stays at WARNING so log lines do not interleave with task output.
    setup_logging(log_dir=settings.log_dir, console_level=logging.WARNING, file_level=file_level)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)
    try:
        run_console_loop(state)
    finally:
        flush_tasks(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
