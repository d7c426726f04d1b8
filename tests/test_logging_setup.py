# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace

from tasklist.logging_setup import ACCESS_LOGGER, _ForeignWarningsFilter, level_from_name, setup_logging


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_records_and_foreign_warnings() -> None:
    f = _ForeignWarningsFilter()

    assert f.filter(_record("tasklist", logging.DEBUG))
    assert f.filter(_record("tasklist.server.http_server", logging.INFO))
    assert not f.filter(_record("tasklistextra", logging.INFO))
    assert not f.filter(_record("urllib3", logging.INFO))
    assert f.filter(_record("urllib3", logging.WARNING))
    assert f.filter(_record("py.warnings", logging.WARNING))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" WARNING ") == logging.WARNING
    assert level_from_name("15") == 15
    assert level_from_name("bogus") == logging.INFO
    assert level_from_name(None, default=logging.ERROR) == logging.ERROR


def test_setup_logging_splits_app_and_access_files(tmp_path: Path) -> None:
    root = logging.getLogger()
    access = logging.getLogger(ACCESS_LOGGER)
    saved_root = list(root.handlers), root.level
    saved_access = list(access.handlers), access.level, access.propagate
    try:
        setup_logging(SimpleNamespace(data_dir=tmp_path / "data", log_level="WARNING"))

        console = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]
        assert [h.level for h in console] == [logging.WARNING]

        logging.getLogger("tasklist.test").debug("hello file")
        access.info("127.0.0.1 GET / 200")
        for h in root.handlers + access.handlers:
            h.flush()

        app_text = (tmp_path / "data" / "tasklist.log").read_text("utf-8")
        access_text = (tmp_path / "data" / "access.log").read_text("utf-8")
        assert "hello file" in app_text
        assert "GET / 200" not in app_text
        assert "GET / 200" in access_text
        assert "hello file" not in access_text
    finally:
        for logger, handlers, level in ((root, saved_root[0], saved_root[1]), (access, saved_access[0], saved_access[1])):
            for h in list(logger.handlers):
                logger.removeHandler(h)
                h.close()
            for h in handlers:
                logger.addHandler(h)
            logger.setLevel(level)
        access.propagate = saved_access[2]
        logging.captureWarnings(False)
