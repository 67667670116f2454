"""Logging configuration for slugsmith.

The library logs through the ``logger`` instance from this module and
stays silent by default. Applications (and the ``slug`` CLI) call
:func:`configure_logging` to get output on stderr.
"""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("slugsmith")
logger.addHandler(logging.NullHandler())

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: int = logging.INFO) -> logging.Handler:
    """Attach a stderr handler to the slugsmith logger.

    Returns the handler so callers (or tests) can remove it later.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


__all__ = ["configure_logging", "logger"]
