"""Logging setup for the API process.

Everything is written to stdout through a single handler that Uvicorn shares.
Switches come from the environment rather than ``Settings`` because logging
is configured at import time, before a missing ``JWT_SECRET_KEY`` could be
reported.

Domain services attach who did what through ``extra=``; the JSON formatter
lifts those keys to top-level fields::

    logger.info(
        "Donation request created",
        extra={"actor": email, "donation_request_id": str(request_id)},
    )
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
import sys
from datetime import UTC, datetime
from typing import Any

_TRUTHY = frozenset({"1", "true", "t", "yes", "y", "on"})

# Set by the request middleware and the exception handlers.
REQUEST_FIELDS = (
    "method",
    "path",
    "query",
    "status_code",
    "duration_ms",
    "client_ip",
    "user_agent",
    "error_type",
)

# Set by the user, donation and funding services.
AUDIT_FIELDS = ("actor", "donation_request_id", "donation_status")


def env_bool(name: str, *, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


class JsonFormatter(logging.Formatter):
    """Render a record as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        payload.update(
            (key, record.__dict__[key])
            for key in REQUEST_FIELDS + AUDIT_FIELDS
            if key in record.__dict__
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def build_logging_config(
    level: str, *, as_json: bool, uvicorn_access: bool
) -> dict[str, Any]:
    """dictConfig for the app, Uvicorn and the chatty third-party loggers."""
    quiet = {
        "httpx": os.getenv("HTTPX_LOG_LEVEL", "WARNING"),
        "sqlalchemy.engine": os.getenv("SQL_LOG_LEVEL", "WARNING"),
        "uvicorn.access": "INFO" if uvicorn_access else "WARNING",
    }
    loggers: dict[str, dict[str, Any]] = {
        name: {"level": level, "propagate": True}
        for name in ("uvicorn", "uvicorn.error")
    }
    loggers.update(
        {name: {"level": lvl, "propagate": True} for name, lvl in quiet.items()}
    )

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"},
            "json": {"()": "app.core.logging.JsonFormatter"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "json" if as_json else "text",
                "stream": sys.stdout,
            }
        },
        "root": {"handlers": ["console"], "level": level},
        "loggers": loggers,
    }


def configure_logging() -> None:
    """Apply the logging config described by the environment.

    Env vars:
    - LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    - LOG_JSON: one JSON object per line (default: false)
    - LOG_REQUESTS: per-request access lines from our middleware (default: true)
    - LOG_UVICORN_ACCESS: Uvicorn's own access log (default: off while
      LOG_REQUESTS is on, so each request is logged once)
    """
    log_requests = env_bool("LOG_REQUESTS", default=True)
    config = build_logging_config(
        os.getenv("LOG_LEVEL", "INFO").upper(),
        as_json=env_bool("LOG_JSON", default=False),
        uvicorn_access=env_bool("LOG_UVICORN_ACCESS", default=not log_requests),
    )
    logging.config.dictConfig(config)
