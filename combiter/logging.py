"""Loggers for combiter.

Modules log under the ``combiter`` logger, which carries only a
``NullHandler``: importing the package never prints anything. Applications
that want to see the records call :func:`enable_logging`.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "combiter"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_package_logger = logging.getLogger(ROOT_LOGGER_NAME)
_package_logger.addHandler(logging.NullHandler())

# handler installed by enable_logging(), if any
_handler: Optional[logging.Handler] = None


def get_logger(name: str) -> logging.Logger:
    """Logger for a combiter module; pass ``__name__``."""
    return logging.getLogger(name)


def enable_logging(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
    format_string: Optional[str] = None,
) -> logging.Handler:
    """Route ``combiter`` records at ``level`` and above to ``handler``.

    A second call replaces the handler of the first one, so output is never
    duplicated.

    Args:
        level: Level of the ``combiter`` logger.
        handler: Destination; defaults to a stderr StreamHandler.
        format_string: Record format; defaults to ``DEFAULT_FORMAT``.

    Returns:
        The installed handler.
    """
    global _handler

    if _handler is not None:
        _package_logger.removeHandler(_handler)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    _package_logger.addHandler(handler)
    _package_logger.setLevel(level)
    _handler = handler
    return handler


def enable_debug_logging() -> logging.Handler:
    """Show the start and exhaustion records of every enumeration on stderr."""
    return enable_logging(logging.DEBUG)


def reset_logging() -> None:
    """Undo :func:`enable_logging`."""
    global _handler

    if _handler is not None:
        _package_logger.removeHandler(_handler)
        _handler = None
    _package_logger.setLevel(logging.NOTSET)
