"""Opt-in log output for the ``multi_oauth`` logger tree.

Library modules only create loggers. Hosts that want the OAuth flow's
log lines without configuring logging themselves call ``init_logging``.
"""
from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

PACKAGE_LOGGER = "multi_oauth"
PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_HANDLER_NAME = "multi_oauth.stream"
# Attributes every LogRecord carries; anything else came in via ``extra=``
_STANDARD_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, ``extra=`` fields nested under ``extra``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        extra = {
            key: value
            for key, value in vars(record).items()
            if not key.startswith("_") and key not in _STANDARD_ATTRS
        }
        if extra:
            payload["extra"] = extra
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def init_logging(
    level: int | str = logging.INFO,
    fmt: str = "plain",
    stream: TextIO | None = None,
) -> logging.Handler:
    """
    Send ``multi_oauth`` log records to a stream.

    Only the package logger is touched, never the root logger. Calling
    again replaces the handler installed by the previous call.

    Args:
        level: Logging level, as an int or a name such as "DEBUG"
        fmt: "plain" or "json"
        stream: Destination, stdout when None

    Returns:
        The installed handler
    """
    fmt = fmt.lower()
    if fmt not in ("plain", "json"):
        raise ValueError(f"Unknown log format: {fmt!r} (expected 'plain' or 'json')")

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(package_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(existing)

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(JsonFormatter() if fmt == "json" else logging.Formatter(PLAIN_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper() if isinstance(level, str) else level)
    return handler
