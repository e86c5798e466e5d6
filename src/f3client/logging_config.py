"""
Logging helpers for the client and its CLI.

Purpose:
- Give request tracing (HTTP method/URL, failing statuses) a consistent format.
- Support JSONL output for ingestion by log pipelines.

The library only creates module loggers under the "f3client" namespace;
setup_logging() attaches a handler to that namespace and leaves the root
logger to the application.
"""

from __future__ import annotations

import json
import logging
import time

PACKAGE_LOGGER = "f3client"
PLAIN_FORMAT = "%(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """
    One JSON object per record.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_logging(level: str = "WARNING", *, json_output: bool = False) -> logging.Logger:
    """
    Configure the package logger; calling it again replaces the handler.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(PLAIN_FORMAT))
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
