"""teatimer — the stopwatch loop.

Ties the clock to the terminal: every tick the elapsed time is redrawn in
place, and Ctrl+C stops the loop while leaving the final time on screen.

The loop wakes ten times a second, so Ctrl+C is noticed within 100 ms even
though the display only changes once a second.
"""

from __future__ import annotations

import logging
import signal
import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

from teatimer.clock import Clock, format_seconds
from teatimer.errors import HandlerInstallError
from teatimer.terminal import Terminal

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.1  # seconds


@dataclass
class StopwatchConfig:
    """Knobs for embedding and testing the stopwatch."""
    tick_interval: float = TICK_INTERVAL
    clock_source: Callable[[], float] = field(default=time.monotonic)
    sleep: Callable[[float], None] = field(default=time.sleep)


class Stopwatch:
    """Counts up on the terminal until interrupted."""

    def __init__(
        self,
        terminal: Optional[Terminal] = None,
        config: Optional[StopwatchConfig] = None,
    ) -> None:
        self.config = config or StopwatchConfig()
        self.terminal = terminal or Terminal()
        self.clock = Clock(self.config.clock_source)
        self._cancelled = threading.Event()
        self._previous_handler = None
        self._handler_installed = False
        self.ticks = 0
        self.shown: Optional[int] = None

    @property
    def running(self) -> bool:
        return not self._cancelled.is_set()

    # =====================================================================
    # Cancellation
    # =====================================================================

    def cancel(self) -> None:
        """Ask the loop to stop after its current tick."""
        self._cancelled.set()

    def interrupt(self, signum=None, frame=None) -> None:
        """SIGINT handler.

        Never blocks: if the loop is mid-frame the cleanup is left to the
        loop's own shutdown. Must not log, since it can run on top of any
        bytecode in the main thread.
        """
        self.cancel()
        self.terminal.try_finish()

    def install_handler(self) -> None:
        """Route SIGINT to interrupt(). Other signals keep their defaults."""
        try:
            self._previous_handler = signal.signal(signal.SIGINT, self.interrupt)
        except (ValueError, OSError) as exc:
            raise HandlerInstallError(f"cannot install Ctrl-C handler: {exc}") from exc
        self._handler_installed = True
        logger.debug("SIGINT handler installed")

    def restore_handler(self) -> None:
        if not self._handler_installed:
            return
        previous = self._previous_handler
        if previous is None:
            previous = signal.SIG_DFL
        signal.signal(signal.SIGINT, previous)
        self._handler_installed = False
        self._previous_handler = None

    # =====================================================================
    # Main loop
    # =====================================================================

    def run(self) -> int:
        """Run until cancelled and return the last displayed seconds.

        Terminal errors propagate out of here untouched.
        """
        self.install_handler()
        try:
            self.terminal.hide()
            self.clock.start()
            logger.debug("started, tick interval %.3fs", self.config.tick_interval)

            self._loop()

            # No-op when the interrupt handler already got there.
            if not self.terminal.finish():
                logger.debug("cleanup already done by interrupt handler")
        finally:
            self.restore_handler()

        shown = self.shown or 0
        logger.info("stopped at %s after %d ticks", format_seconds(shown), self.ticks)
        return shown

    def _loop(self) -> None:
        while True:
            seconds = self.clock.elapsed_seconds()
            # The text only changes once a second; skip identical redraws.
            if seconds != self.shown and self.terminal.draw(format_seconds(seconds)):
                self.shown = seconds
            self.ticks += 1

            self.config.sleep(self.config.tick_interval)
            if self._cancelled.is_set():
                break
