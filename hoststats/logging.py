"""Centralized logging configuration for hoststats."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER_CONFIGURED = False


def setup_root_logger(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Set up the root ``hoststats`` logger with a single handler.

    Only the first call has an effect, so importing modules can call it freely.

    Args:
        level: Logging level (default: INFO).
        handler: Custom handler (optional, defaults to a RichHandler on stderr).
    """
    global _ROOT_LOGGER_CONFIGURED

    if _ROOT_LOGGER_CONFIGURED:
        return

    root_logger = logging.getLogger("hoststats")
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.addHandler(handler)

    # Let records reach the root logger so pytest can capture them
    root_logger.propagate = True

    _ROOT_LOGGER_CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``hoststats`` root logger.

    Args:
        name: Logger name (typically __name__ from calling module).

    Returns:
        Logger inheriting level and handler from the package root.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the log level for all hoststats loggers."""
    setup_root_logger()
    logging.getLogger("hoststats").setLevel(level)
