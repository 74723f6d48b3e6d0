"""Logging configuration.

Adapters and services log through ``logging.getLogger(__name__)`` with
structured ``extra`` fields. ``configure_logging`` installs a handler on
the package logger, plain text by default or one JSON object per line
when ``ObservabilityConfig.structured`` is set.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "travel_catalog"

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured log output."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
        }
        for key, value in vars(record).items():
            if key not in _RESERVED and not key.startswith("_"):
                log_data[key] = value
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Configure the package logger from the observability settings.

    Calling it again replaces the previously installed handler.

    Args:
        config: Optional override; defaults to ``get_config().observability``.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return logger
