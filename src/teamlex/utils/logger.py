"""Logging helpers for teamlex.

Library modules only ever call ``get_logger``; handlers are the
application's business. The CLI is the one place that attaches a
handler, through ``configure_logging``.

Example:
    >>> from teamlex.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Scanning source")
"""

from __future__ import annotations

import logging
from typing import TextIO

ROOT_LOGGER_NAME = "teamlex"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Handler installed by the last configure_logging() call
_installed_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``teamlex`` namespace.

    Args:
        name: Logger name (typically __name__)

    Example:
        >>> get_logger("mymodule").name
        'teamlex.mymodule'
    """
    if not (name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + ".")):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def configure_logging(stream: TextIO, *, verbose: bool = False) -> logging.Handler:
    """Send ``teamlex`` log records to ``stream``.

    Works whether or not the root logger already has handlers. Calling it
    again replaces the handler from the previous call, so repeated
    in-process runs never log twice.

    Args:
        stream: Destination for log lines.
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The installed handler.
    """
    global _installed_handler

    level = logging.DEBUG if verbose else logging.WARNING
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _installed_handler is not None:
        package_logger.removeHandler(_installed_handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler.setLevel(level)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    _installed_handler = handler
    return handler
