# src/task_tracker/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (restoring stored tasks), then runs
the text menu in the main thread until the user exits.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state
from ..cli.menu import run_menu_loop
from ..config import get_settings
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    # choose console log level from settings.log_level
    console_level = getattr(logging, settings.log_level, logging.INFO)
    setup_logging(
        log_dir=settings.data_dir,
        console_level=console_level,
        log_to_file=settings.log_to_file,
    )

    logger.info("Starting %s...", settings.app_name)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    # Every mutation persists on its own; nothing to flush on the way out.
    try:
        run_menu_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
