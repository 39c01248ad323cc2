"""Logging setup for teatimer.

Log records go to stderr through Rich so they never land on the stopwatch
line on stdout. The level comes from ``TEATIMER_LOG_LEVEL`` (default WARNING).

Usage:
    from teatimer.log import setup_logging

    setup_logging()                 # level from the environment
    setup_logging(logging.DEBUG)    # explicit level
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

ENV_LOG_LEVEL = "TEATIMER_LOG_LEVEL"
DEFAULT_LEVEL = logging.WARNING


def resolve_level(level: Optional[Union[int, str]] = None) -> int:
    """Turn a level name or number into a logging level.

    Unknown names fall back to WARNING.
    """
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "")
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else DEFAULT_LEVEL


def setup_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """Configure the ``teatimer`` logger. Safe to call more than once."""
    logger = logging.getLogger("teatimer")
    logger.setLevel(resolve_level(level))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
