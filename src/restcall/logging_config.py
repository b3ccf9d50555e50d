"""Logging setup for applications embedding restcall."""

import logging
import sys
from typing import Optional, TextIO

DEFAULT_FORMAT = "%(asctime)s - %(name)s [%(threadName)s] - %(levelname)s - %(message)s"


def _make_handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: str = "WARNING",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the "restcall" logger.

    Failed requests are logged at ERROR with their traceback, dispatch
    details at DEBUG. The library never configures logging on its own;
    call this from the host application if you want that output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for logging output
        format_string: Optional custom format string for log messages
        stream: Stream for console output (defaults to stdout)
        force: If True, reconfigure even if handlers exist

    Returns:
        The configured "restcall" logger
    """
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger("restcall")
    logger.setLevel(numeric_level)

    if force or not logger.handlers:
        logger.handlers.clear()
        logger.addHandler(_make_handler(logging.StreamHandler(stream or sys.stdout), numeric_level, format_string))
        if log_file:
            logger.addHandler(_make_handler(logging.FileHandler(log_file), numeric_level, format_string))

    # Keep records out of the root logger to avoid duplicates
    logger.propagate = False

    return logger
