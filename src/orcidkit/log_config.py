"""Logging setup for command-line use.

Library modules only create loggers; nothing is configured on import.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


class SimpleFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname}] {record.name}: {record.getMessage()}"


def configure_logging(level: str = "WARNING", fmt: str = "text") -> logging.Logger:
    """Send ``orcidkit`` logs to stderr in text or JSON form.

    Calling it again replaces the handler instead of stacking a second one.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(JsonFormatter() if fmt == "json" else SimpleFormatter())

    package_logger = logging.getLogger("orcidkit")
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.setLevel(log_level)
    package_logger.addHandler(handler)
    package_logger.propagate = False
    return package_logger
