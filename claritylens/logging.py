"""
Logging for the analysis pipeline.

One JSON object per line on stdout, under the "claritylens" logger
namespace. Besides timestamp, level, logger and message, a record
carries whichever of these extras the call site supplied:

  depth, word_count, composite_score   orchestrator runs
  provider, attempt, status_code,
  retry_after, error, error_type       AI retries and degradations
  duration_ms, method, path            HTTP requests

CLARITYLENS_LOG_FORMAT=text switches to a plain console format.

Usage:
    from claritylens.logging import get_logger
    logger = get_logger("analyzer")
    logger.info("Analysis complete", extra={"depth": "full", "composite_score": 64})
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone


LOG_LEVEL = os.getenv("CLARITYLENS_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("CLARITYLENS_LOG_FORMAT", "json")  # "json" or "text"

_EXTRA_FIELDS = (
    "depth", "word_count", "composite_score", "provider", "attempt",
    "status_code", "retry_after", "duration_ms", "error", "error_type",
    "method", "path",
)


class JSONFormatter(logging.Formatter):
    """Formats log records as JSON lines."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key in _EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is not None:
                entry[key] = val

        if record.exc_info and record.exc_info[0]:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable format for development."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging():
    """Configure the claritylens logger. Call once at app startup."""
    root = logging.getLogger("claritylens")
    root.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if LOG_FORMAT == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(TextFormatter())

    root.addHandler(handler)

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a named logger under the claritylens namespace."""
    return logging.getLogger(f"claritylens.{name}")
