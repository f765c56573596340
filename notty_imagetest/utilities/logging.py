"""Logging configuration for notty-imagetest.

Stdout carries the escape sequence, so every record goes to stderr.
"""

import logging
import sys
from typing import Literal, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(levelname)s: %(message)s"


def normalize_level(value: str | None) -> str | None:
    """Accept level names in any case, e.g. ``--log-level debug``.

    Unknown names are returned upper-cased for settings validation to reject.
    """
    if value is None:
        return None
    return value.strip().upper()


def configure_logging(level: LogLevel = "INFO", stream: TextIO | None = None) -> None:
    """Configure logging for notty-imagetest on stderr, or on ``stream``."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=stream if stream is not None else sys.stderr,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
