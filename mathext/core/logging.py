"""
Structured Logging: JSON-Formatted Output

The library itself only emits records through module-level loggers under the
"mathext" namespace; setup_logging() is a convenience for applications and
test runs that want those records on a stream.
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Optional, TextIO

from mathext.core.config import get_config, set_config

# Attributes present on every LogRecord; anything else came in via `extra=`
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename",
    "funcName", "levelname", "levelno", "lineno",
    "module", "msecs", "pathname", "process",
    "processName", "relativeCreated", "stack_info",
    "exc_info", "exc_text", "thread", "threadName",
    "taskName",
})


class JsonFormatter(logging.Formatter):
    """JSON log formatter, one object per line."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                data[key] = value

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


def setup_logging(
    level: str = "WARNING",
    json_output: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Handler:
    """
    Attach a stream handler to the "mathext" logger.

    Args:
        level: Minimum log level name
        json_output: Use JSON formatting
        stream: Output stream (default: stderr)

    Returns:
        The installed handler

    Raises:
        ConfigError: If level is not a known level name
    """
    # Recorded in the config so later set_config() calls keep this level
    set_config(replace(get_config(), log_level=level.upper()))
    package_logger = logging.getLogger("mathext")
    package_logger.setLevel(level.upper())

    # Replace handlers from a previous call
    package_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level.upper())

    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
        ))

    package_logger.addHandler(handler)
    return handler
