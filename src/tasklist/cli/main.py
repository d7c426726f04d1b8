# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then starts front-ends:
- console REPL in the main thread (optional),
- HTTP page server in a background thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading

from ..cli.bootstrap import create_initial_state, shutdown_state
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging
from ..server.http_server import HttpBackgroundRunner, start_http_in_background

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    setup_logging(settings)

    logger.info("Starting %s...", settings.app_name)

    state = create_initial_state(settings=settings)

    http_runner: HttpBackgroundRunner | None = None
    if settings.http_enabled:
        http_runner = start_http_in_background(settings)
        logger.info("Serving %s page on port %s.", settings.http_mode, http_runner.port)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        if settings.console_enabled:
            run_console_loop(state)
            stop_main.set()
        else:
            signal.signal(signal.SIGINT, _handle_signal)
            signal.signal(signal.SIGTERM, _handle_signal)
            logger.info("Console disabled. Running background front-ends only. Press Ctrl+C to stop.")
            stop_main.wait()

    finally:
        if http_runner is not None:
            http_runner.stop()
            http_runner.join(timeout=10.0)

        shutdown_state(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
