"""
Logging helpers.

The library never configures logging on import. Every module logs through
get_logger(__name__), and the package root logger carries a NullHandler so
nothing is printed unless the application (or a test session) calls
setup_logging() or configures the stdlib logging module itself.

Usage:
    from galaxon.core.log import get_logger, setup_logging

    logger = get_logger(__name__)
    logger.debug("Rejected ordering result", extra={"result": 5})
"""

import logging
import sys
from typing import Optional, TextIO

LIBRARY_LOGGER_NAME = "galaxon"

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

logging.getLogger(LIBRARY_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger inside the library namespace.

    Args:
        name: Usually __name__ of the calling module

    Returns:
        Logger named `name` if it is already under "galaxon", otherwise
        "galaxon.<name>"
    """
    if name == LIBRARY_LOGGER_NAME or name.startswith(LIBRARY_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LIBRARY_LOGGER_NAME}.{name}")


def setup_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the library root logger.

    Calling it more than once replaces the handler installed by the previous
    call instead of stacking duplicates.

    Args:
        level: Logging level for the library root logger
        fmt: Format string for the handler
        stream: Target stream (default: sys.stderr)

    Returns:
        The configured library root logger
    """
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, "_galaxon_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    handler._galaxon_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
