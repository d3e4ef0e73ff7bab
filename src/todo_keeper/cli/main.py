# src/todo_keeper/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (opening the store and creating the schema),
then runs the console connector until the user quits.
"""

from __future__ import annotations

import logging
import sys

from ..cli.bootstrap import create_initial_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.errors import StoreError
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    logger.info("Starting %s...", settings.app_name)

    try:
        state = create_initial_state(settings=settings)
    except StoreError:
        logger.critical("Cannot initialize todo store at %s, aborting.", settings.db_path)
        sys.exit(1)

    try:
        run_console_loop(state)
    finally:
        state.close()
        logger.info("Bye.")


if __name__ == "__main__":
    main()
