"""Board Logging — one root handler, JSON lines or plain text.

Invariants:
    - Every record carries timestamp, level, logger and message
    - Board context (stone_id, post_id, pin_color) and request context
      (error_code, path, host) appear only when the caller passed them as extras
    - Japanese nicknames and messages stay readable (no ASCII escaping)
    - setup_logging replaces root handlers, so calling it twice does not
      duplicate output

Design Decisions:
    - LOG_FORMAT=json for containers, anything else gives the text format
      for local runs
"""

import logging
import json
from datetime import datetime, timezone

BOARD_EXTRA_KEYS = ("stone_id", "post_id", "pin_color")
REQUEST_EXTRA_KEYS = ("error_code", "path", "host")

_TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc,
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in BOARD_EXTRA_KEYS + REQUEST_EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is not None:
                entry[key] = value
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JSONFormatter()
    return logging.Formatter(_TEXT_FORMAT)


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Install a single stream handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(build_formatter(fmt))
    logging.root.handlers = [handler]
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
