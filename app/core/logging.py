# File: app/core/logging.py

import logging
import time

from fastapi import FastAPI, Request

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

request_logger = logging.getLogger("app.request")


def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger once. Calling it again only adjusts the level.
    """
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    root.setLevel(level.upper())


def add_request_logging(app: FastAPI) -> None:
    """One log line per request: METHOD path -> status (ms)."""

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        request_logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
