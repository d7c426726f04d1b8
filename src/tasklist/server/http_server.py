# src/tasklist/server/http_server.py

"""
Minimal HTTP servers for serving the task-list page.

Two modes, no routing:
- "hello": every GET returns a fixed HTML greeting.
- "file":  every GET returns the configured asset file as HTML,
           or 500 with the error message if the file cannot be read.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from dataclasses import dataclass
from functools import partial
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path

from ..logging_setup import ACCESS_LOGGER

logger = logging.getLogger(__name__)
access_logger = logging.getLogger(ACCESS_LOGGER)

HTML_CONTENT_TYPE = "text/html; charset=utf-8"
TEXT_CONTENT_TYPE = "text/plain; charset=utf-8"

HELLO_BODY = b"<h1>Hello Python!</h1><p>Hello server!</p>"


class _BaseHandler(BaseHTTPRequestHandler):
    server_version = "tasklist"

    def _send(self, status: int, content_type: str, body: bytes) -> None:
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        access_logger.info("%s %s", self.address_string(), format % args)


class HelloHandler(_BaseHandler):
    def do_GET(self) -> None:
        self._send(200, HTML_CONTENT_TYPE, HELLO_BODY)


class AssetHandler(_BaseHandler):
    def __init__(self, *args, asset_path: Path, **kwargs) -> None:
        # Must be set before super().__init__, which handles the request.
        self.asset_path = asset_path
        super().__init__(*args, **kwargs)

    def do_GET(self) -> None:
        try:
            data = self.asset_path.read_bytes()
        except OSError as e:
            logger.error("Failed to read asset %s: %s", self.asset_path, e)
            self._send(500, TEXT_CONTENT_TYPE, str(e).encode("utf-8"))
            return
        self._send(200, HTML_CONTENT_TYPE, data)


def make_server(
    *,
    mode: str = "file",
    host: str = "127.0.0.1",
    port: int = 8080,
    asset_path: str | Path = "index.html",
) -> ThreadingHTTPServer:
    """Bind (but do not start) a server. Port 0 picks a free port."""
    mode = (mode or "").strip().lower()
    if mode == "hello":
        handler = HelloHandler
    elif mode == "file":
        handler = partial(AssetHandler, asset_path=Path(asset_path))
    else:
        raise ValueError(f"unknown HTTP mode: {mode!r} (expected 'hello' or 'file')")

    server = ThreadingHTTPServer((host, int(port)), handler)
    server.daemon_threads = True
    logger.info("HTTP server (%s) listening on http://%s:%s", mode, host, server.server_port)
    return server


@dataclass
class HttpBackgroundRunner:
    server: ThreadingHTTPServer
    thread: threading.Thread

    @property
    def port(self) -> int:
        return int(self.server.server_port)

    def stop(self) -> None:
        try:
            self.server.shutdown()
        except Exception:
            logger.debug("Failed to signal HTTP server stop.", exc_info=True)
        with contextlib.suppress(OSError):
            self.server.server_close()

    def join(self, timeout: float | None = None) -> None:
        self.thread.join(timeout=timeout)


def start_http_in_background(settings) -> HttpBackgroundRunner:
    """
    Start the HTTP server in a background thread (so the console REPL can run in parallel).
    """
    server = make_server(
        mode=settings.http_mode,
        host=settings.http_host,
        port=settings.http_port,
        asset_path=settings.asset_path,
    )
    t = threading.Thread(target=server.serve_forever, name="tasklist-http", daemon=True)
    t.start()
    logger.info("HTTP background thread started.")
    return HttpBackgroundRunner(server=server, thread=t)
