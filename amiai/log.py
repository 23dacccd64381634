"""Diagnostic logging setup.

The library only emits records on the ``amiai`` logger.  Nothing is printed
unless a caller attaches a handler: the CLI does so for ``--debug``, and
detection calls do so themselves when ``AMI_DEBUG`` is true.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "amiai"

_HANDLER_ATTR = "_amiai_handler"


def configure_logging(*, debug: bool = False, stream: TextIO | None = None) -> logging.Logger:
    """Send ``amiai`` diagnostics to stderr (or *stream*).

    Safe to call repeatedly; the handler installed by a previous call is
    replaced rather than duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_ATTR, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("[am-i-ai] %(message)s"))
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger


def enable_debug_logging() -> None:
    """Turn on debug output for embedders that set ``AMI_DEBUG``.

    A handler already installed by :func:`configure_logging` (for instance by
    the CLI) is left alone.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if any(getattr(handler, _HANDLER_ATTR, False) for handler in logger.handlers):
        return
    configure_logging(debug=True)
