from __future__ import annotations

"""Logging setup for the command-line entry point."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "docsim"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger under the package namespace."""

    if not name or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(
    level: int | str = logging.INFO, *, console: Console | None = None
) -> logging.Logger:
    """Attach a single rich handler to the package logger.

    Calling this again replaces the previous handler instead of stacking.
    """

    logger = get_logger()
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
