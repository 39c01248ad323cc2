"""Elapsed-time source and HH:MM:SS formatting."""

from __future__ import annotations

import time
from typing import Callable, Optional


def format_seconds(seconds: int) -> str:
    """Format whole seconds as HH:MM:SS.

    Hours are not capped; past 99 the field simply widens ("100:00:00").
    """
    secs = seconds % 60
    minutes = (seconds // 60) % 60
    hours = seconds // 3600
    return f"{hours:02d}:{minutes:02d}:{secs:02d}"


class Clock:
    """Counts whole seconds from a monotonic start instant.

    Elapsed time is recomputed from the source on every call rather than
    accumulated, so loop jitter never drifts the display.
    """

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._start: Optional[float] = None

    @property
    def started(self) -> bool:
        return self._start is not None

    def start(self) -> None:
        """Capture the reference instant. May only be called once."""
        if self._start is not None:
            raise RuntimeError("clock already started")
        self._start = self._source()

    def elapsed_seconds(self) -> int:
        """Whole seconds since start().

        The clamp at zero only matters for injected test sources; time.monotonic
        never runs backwards.
        """
        if self._start is None:
            raise RuntimeError("clock not started")
        return max(int(self._source() - self._start), 0)
