"""Logging configuration for the renderer.

Library modules only create module loggers with logging.getLogger(__name__)
and never install handlers. Applications call setup_logging() once to get
console output for the whole package.
"""

from __future__ import annotations

import logging
import os

# Root logger of the package; every module logger is a child of it
PACKAGE_LOGGER = "src.raytracer"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Environment variable overriding the configured level
LOG_LEVEL_ENV = "RAYTRACER_LOG_LEVEL"


def setup_logging(level: str | None = None, fmt: str = LOG_FORMAT) -> logging.Logger:
    """Attach a console handler to the package logger.

    Calling it again replaces the previously installed handler instead of
    stacking a new one.

    Args:
        level: Log level name (DEBUG, INFO, ...). Defaults to the
            RAYTRACER_LOG_LEVEL environment variable, then INFO.
        fmt: Log record format.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "INFO")
    resolved = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(resolved)
    for handler in list(logger.handlers):
        if getattr(handler, "_raytracer_handler", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter(fmt))
    console_handler._raytracer_handler = True  # type: ignore[attr-defined]
    logger.addHandler(console_handler)
    return logger
