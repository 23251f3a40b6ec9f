"""Logging setup driven by ObservabilityConfig.

Modules log through ``logging.getLogger(__name__)`` and pass context as
``extra=`` fields. With ``structured`` enabled those fields end up in
one JSON object per line.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .config import ObservabilityConfig, get_config

# Attributes every LogRecord has; anything else came in through extra=
_RESERVED = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Format records as single-line JSON objects, extra fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Configure the root logger from the observability settings."""
    config = config or get_config().observability

    handler = logging.StreamHandler()
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    logging.basicConfig(
        level=config.level.upper(),
        handlers=[handler],
        force=True,
    )
