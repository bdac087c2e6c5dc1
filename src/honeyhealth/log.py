"""
Logging setup for the honey-health CLI.

Library modules only call ``logging.getLogger(__name__)``; handlers are
installed here, once, by the command-line entry point.

Two formats:

- ``json``: one JSON object per record, for log pipelines
- ``text``: ``LEVEL logger: message`` for humans

Usage:
    from honeyhealth.log import configure_logging

    configure_logging(level="debug", fmt="json")
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

ROOT_LOGGER = "honeyhealth"
TEXT_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Formats records as single-line JSON objects."""

    def __init__(self, service_name: str = "honey-health") -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def configure_logging(
    level: str = "info",
    fmt: str = "text",
    service_name: str = "honey-health",
) -> logging.Logger:
    """Install a single stderr handler on the ``honeyhealth`` logger.

    Calling it again replaces the previous handler, so the CLI can
    reconfigure after reading options.
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level.upper())

    for handler in list(logger.handlers):
        if getattr(handler, "_honeyhealth", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter(service_name))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    handler._honeyhealth = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
