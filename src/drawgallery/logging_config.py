"""Logging configuration for the drawing gallery server."""

import logging
import sys
from typing import Literal

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Per-request access lines repeat what the gallery handlers log
QUIET_LOGGERS = ("uvicorn.access", "watchfiles")


def configure_logging(level: LogLevel = "INFO", log_format: str = DEFAULT_FORMAT) -> None:
    """Send all gallery logs to stdout at the given level.

    Args:
        level: Root log level.
        log_format: Format string for the stdout handler.
    """
    logging.basicConfig(
        level=getattr(logging, level),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(logging.WARNING, logging.getLogger().level))

    logging.getLogger(__name__).debug("Logging configured with level: %s", level)
