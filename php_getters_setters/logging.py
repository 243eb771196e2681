"""Logging setup shared by the command line and the language server."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import IO

PACKAGE_LOGGER = "php_getters_setters"
STANDARD_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Only useful when debugging the protocol layer itself
QUIET_LOGGERS = ("pygls", "asyncio")


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data)


def _formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return JsonFormatter()
    return logging.Formatter(STANDARD_FORMAT, datefmt="%H:%M:%S")


def setup_logging(
    level: str = "WARNING",
    format_type: str = "standard",
    stream: IO[str] | None = None,
) -> None:
    """
    Route all records to a single handler on stderr.

    stdout is left alone: it carries generated code in dry-run mode and the
    message stream of the stdio language server. Unknown level names fall
    back to WARNING.
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.WARNING

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(_formatter(format_type))

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(log_level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
