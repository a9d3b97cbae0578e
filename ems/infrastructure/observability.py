"""Logging setup — one stderr handler, JSON lines or plain text.

Invariants:
    - A JSON line always carries timestamp, level, logger and message
    - Of the `extra=` fields, only the ones the engine and error handlers emit
      (employee_id, caller, operation, error_code, path) are copied into the line
    - timestamp is when the event was logged (LogRecord.created), in UTC
    - setup_logging is idempotent: a second call replaces its own handler

Design Decisions:
    - Extras are whitelisted so a stray `extra=` key never changes the line shape
      that log shippers index on
    - Format chosen by Settings.log_format: "json" for deployments, "text" for
      local runs and tests
"""

import logging
import json
from datetime import datetime, timezone

_EXTRA_KEYS = ("employee_id", "caller", "operation", "error_code", "path")


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_KEYS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class _EmsHandler(logging.StreamHandler):
    """Marker type so setup_logging can find the handler it installed."""


def setup_logging(level: str = "INFO", fmt: str = "json"):
    handler = _EmsHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
    for existing in list(logging.root.handlers):
        if isinstance(existing, _EmsHandler):
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
