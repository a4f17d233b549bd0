"""Logger hierarchy and handler setup for devpath."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

ROOT_LOGGER = "devpath"
CONSOLE_FORMAT = "[devpath] %(levelname)s %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Library use stays silent until a command installs handlers.
logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``devpath.<name>``, or the package logger itself when no name is given."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)


def configure_logging(
    *,
    verbose: bool = False,
    log_file: Path | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route devpath records to the console and, optionally, a log file.

    The console shows warnings and errors unless ``verbose`` is set, in which
    case stage progress and debug detail are printed as well. A log file
    always receives the full debug trail.
    """
    console_level = logging.DEBUG if verbose else logging.WARNING
    logger = reset_logging()
    logger.propagate = False

    console = logging.StreamHandler(stream)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console)
    logger.setLevel(console_level)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        sink = logging.FileHandler(log_file, encoding="utf-8")
        sink.setLevel(logging.DEBUG)
        sink.setFormatter(logging.Formatter(FILE_FORMAT))
        logger.addHandler(sink)
        logger.setLevel(logging.DEBUG)

    return logger


def reset_logging() -> logging.Logger:
    """Close installed handlers and return the package logger to its silent state."""
    logger = logging.getLogger(ROOT_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.addHandler(logging.NullHandler())
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


__all__ = ["configure_logging", "get_logger", "reset_logging"]
