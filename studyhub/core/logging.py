"""
Structured logging configuration.

- Human-readable text by default, single-line JSON when LOG_FORMAT=json
- Request id + access log middleware
"""
from __future__ import annotations

import json
import logging
import time
import uuid

from fastapi import FastAPI, Request

from studyhub.core.config import Settings

access_logger = logging.getLogger("studyhub.access")


class JSONFormatter(logging.Formatter):
    """Emit log records as single-line JSON."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            entry["request_id"] = record.request_id
        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def setup_logging(settings: Settings) -> None:
    """Configure the root logger from settings."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler()
    if settings.log_format == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    root.addHandler(handler)

    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


def install_access_log(app: FastAPI, static_prefix: str) -> None:
    """Attach a request id to every request and log one access line per response."""

    @app.middleware("http")
    async def _log_request(request: Request, call_next):
        request.state.request_id = uuid.uuid4().hex[:12]
        started = time.time()
        response = await call_next(request)
        if not request.url.path.startswith(static_prefix):
            duration_ms = (time.time() - started) * 1000
            access_logger.info(
                "%s %s %s %.0fms",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={"request_id": request.state.request_id},
            )
        response.headers["X-Request-ID"] = request.state.request_id
        return response
