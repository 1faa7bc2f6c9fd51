"""Logging configuration for the ``tdr`` logger hierarchy.

Only the package logger is touched: the root logger (and any handlers a
host application or pytest installed on it) is left alone.
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER: str = "tdr"

_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``tdr`` logger.

    WARNING and above by default; DEBUG when *verbose*.  Safe to call
    more than once — earlier handlers are replaced, not duplicated.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(handler)
    return logger
