"""Structured Logging — JSON log lines for build runs and the API.

Invariants:
    - Every line carries timestamp (record creation time), level, logger, message
    - Entry and document context (title, position, paths, counts) surfaced when present
    - setup_logging is idempotent: calling it again swaps the handler it installed

Design Decisions:
    - error_extra() is the one place a SideBySideError becomes log fields, so the
      build pass, the CLI and the API handlers log failures with the same keys
"""

import logging
import json
from datetime import datetime, timezone

from sidebyside.core.errors import SideBySideError

HANDLER_NAME = "sidebyside"

_EXTRA_KEYS = (
    "entry_title", "position", "error_code", "source_path", "output_path",
    "output_format", "entries_rendered", "entries_skipped", "path",
)


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log.update(
            (key, record.__dict__[key]) for key in _EXTRA_KEYS
            if record.__dict__.get(key) is not None
        )
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def error_extra(exc: SideBySideError) -> dict:
    """Log fields for a SideBySideError; unset context fields are omitted."""
    ctx = exc.context
    fields = {
        "error_code": exc.code,
        "entry_title": ctx.entry_title,
        "position": ctx.position,
        "source_path": ctx.source_path,
    }
    return {k: v for k, v in fields.items() if v is not None}


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """Install the sidebyside handler on the root logger."""
    handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s",
        ))
    for old in [h for h in logging.root.handlers if h.get_name() == HANDLER_NAME]:
        logging.root.removeHandler(old)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
