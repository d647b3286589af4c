"""Logging configuration for gitsw."""

import logging
import sys


class ColoredFormatter(logging.Formatter):
    """Colored formatter for terminal output."""

    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",
    }

    def format(self, record):
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logging(level: str = "WARNING", stream=None) -> None:
    """
    Configure the ``gitsw`` logger.

    Log records go to stderr; stdout belongs to git's own output.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        stream: Stream to write to, defaults to ``sys.stderr``
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    if stream is None:
        stream = sys.stderr

    package_logger = logging.getLogger("gitsw")
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    if hasattr(stream, "isatty") and stream.isatty():
        formatter = ColoredFormatter(fmt="%(levelname)s %(name)s: %(message)s")
    else:
        formatter = logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    package_logger.addHandler(handler)
