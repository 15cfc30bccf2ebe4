"""Process logging setup.

Module loggers live under the `iconify_mcp` namespace and use the stdlib
`logging` API. `configure_logging` attaches one stderr handler (stdout is
reserved for the stdio transport) with a human-readable or JSON Lines
formatter.
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from ..foundation.config import LoggingSettings

ROOT_LOGGER = "iconify_mcp"

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_TEXT_FORMAT_NO_TS = "[%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def __init__(self, *, include_timestamps: bool = True) -> None:
        super().__init__()
        self.include_timestamps = include_timestamps

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        if self.include_timestamps:
            entry = {"timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(), **entry}
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(entry, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(settings: LoggingSettings | None = None, *, stream: TextIO | None = None) -> logging.Logger:
    """Configure the `iconify_mcp` logger. Safe to call more than once."""
    settings = settings or LoggingSettings()
    root = logging.getLogger(ROOT_LOGGER)
    for handler in list(root.handlers):
        if getattr(handler, "_iconify_mcp", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler._iconify_mcp = True  # type: ignore[attr-defined]
    match settings.format:
        case "json":
            handler.setFormatter(JsonFormatter(include_timestamps=settings.include_timestamps))
        case _:
            handler.setFormatter(logging.Formatter(_TEXT_FORMAT if settings.include_timestamps else _TEXT_FORMAT_NO_TS))

    root.addHandler(handler)
    root.setLevel(settings.level)
    root.propagate = False
    return root
