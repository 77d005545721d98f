"""Package-wide logging for droute.

All modules log through children of the ``"droute"`` logger, which owns a
single handler writing to stderr. Stdout is reserved for route reports so
that ``--format json`` output can be piped straight into other tools.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "droute"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach one handler to the ``droute`` logger. Later calls are no-ops.

    Args:
        level: Initial level of the package logger.
        format_string: Record format; defaults to `DEFAULT_FORMAT`.
        handler: Handler to install; defaults to a stderr `StreamHandler`.
    """
    global _configured

    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))
    root.addHandler(handler)

    # pytest's caplog hooks the real root logger
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` with its level left to the package logger."""
    setup_root_logger()

    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``droute`` logger and of its handlers."""
    setup_root_logger()

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the package handler so `setup_root_logger` can run again."""
    global _configured
    _configured = False

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
