"""Logging setup for the command line.

Library modules only call logging.getLogger(__name__); the CLI wires the
"voxel_shapes" logger to stderr so JSON on stdout stays parseable.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING, log_file: str | None = None) -> logging.Logger:
    """Route package log records to stderr, and optionally to log_file.

    Replaces handlers from a previous call, so repeated CLI invocations in
    one process do not duplicate output.
    """
    logger = logging.getLogger("voxel_shapes")
    logger.setLevel(level)
    logger.propagate = False
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
