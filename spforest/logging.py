"""Package logging for spforest.

Every module logs through a child of the ``spforest`` logger, obtained with
``get_logger(__name__)``. Only that parent logger carries a handler; children
stay at ``NOTSET`` so one call to ``set_global_log_level`` controls them all.

The engine logs a start line, a summary line (nodes settled, steps relaxed,
ties recorded) and, on a weight error, the reason the run was aborted, all at
DEBUG. Nothing is emitted at the default INFO level.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "spforest"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(
    level: int = logging.INFO,
    format_string: Optional[str] = None,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single package handler to the ``spforest`` logger.

    Does nothing if already configured; call ``reset_logging()`` first to
    install a different handler.

    Args:
        level: Package log level.
        format_string: Record format; ``DEFAULT_FORMAT`` if omitted.
        handler: Destination; a stderr ``StreamHandler`` if omitted.
    """
    global _configured
    if _configured:
        return

    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string or DEFAULT_FORMAT))

    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    # Propagate so applications and pytest's caplog still see the records.
    package_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a package logger that defers its level to ``spforest``."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``spforest`` logger and its handlers."""
    setup_root_logger()
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show the engine's per-run DEBUG records."""
    set_global_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Remove the package handler and level. Used by tests."""
    global _configured
    _configured = False
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


setup_root_logger()
