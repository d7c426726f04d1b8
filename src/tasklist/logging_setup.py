# src/tasklist/logging_setup.py

"""
Logging wiring for the console app.

Three destinations:
- stderr: app records at the configured level, everything else WARNING+
- <data_dir>/tasklist.log: all app records (DEBUG)
- <data_dir>/access.log: one line per HTTP request, nowhere else
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

APP_LOGGER = "tasklist"
ACCESS_LOGGER = "tasklist.server.access"

APP_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
ACCESS_FORMAT = "%(asctime)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def level_from_name(name: str | None, default: int = logging.INFO) -> int:
    """'debug' / 'WARNING' / '10' -> logging level; unknown names give the default."""
    raw = (name or "").strip().upper()
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else default


class _ForeignWarningsFilter(logging.Filter):
    """Keep our own records; let third-party loggers through only at WARNING+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == APP_LOGGER or record.name.startswith(APP_LOGGER + "."):
            return True
        return record.levelno >= logging.WARNING


def _setup_access_log(log_dir: Path) -> None:
    access = logging.getLogger(ACCESS_LOGGER)
    for h in list(access.handlers):
        access.removeHandler(h)
        h.close()

    handler = logging.FileHandler(str(log_dir / "access.log"), encoding="utf-8")
    handler.setFormatter(logging.Formatter(ACCESS_FORMAT, datefmt=DATE_FORMAT))
    access.addHandler(handler)
    access.setLevel(logging.INFO)
    # Request lines would interleave with the REPL prompt.
    access.propagate = False


def setup_logging(settings) -> None:
    """
    Configure logging from settings (log_level, data_dir).

    Call this once, before the first record is emitted.
    """
    log_dir = Path(settings.data_dir)
    log_dir.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    for h in list(root.handlers):
        root.removeHandler(h)
        h.close()

    fmt = logging.Formatter(APP_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level_from_name(getattr(settings, "log_level", "INFO")))
    console.setFormatter(fmt)
    console.addFilter(_ForeignWarningsFilter())
    root.addHandler(console)

    app_file = logging.FileHandler(str(log_dir / "tasklist.log"), encoding="utf-8")
    app_file.setLevel(logging.DEBUG)
    app_file.setFormatter(fmt)
    root.addHandler(app_file)

    _setup_access_log(log_dir)

    logging.captureWarnings(True)
