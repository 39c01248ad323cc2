"""Shared terminal handle for teatimer.

The render loop and the SIGINT handler both write to the screen. They share
one ``Terminal`` whose lock makes every frame and the final cleanup atomic
with respect to each other:

- draw(): one complete frame (save, clear, text, restore, flush)
- finish(): show cursor, trailing newline, flush; blocks for the lock
- try_finish(): same cleanup, but gives up at once if the lock is held

Built on Rich's Console, which decides whether we are talking to a terminal
and handles cursor visibility.
"""

from __future__ import annotations

import threading
from typing import Optional

from rich.console import Console


# =========================================================================
# Escape sequences Rich has no ControlType for
# =========================================================================

SAVE_CURSOR = "\x1b7"
RESTORE_CURSOR = "\x1b8"
ERASE_DOWN = "\x1b[J"


class Terminal:
    """Lock-guarded output device shared by the loop and the interrupt handler.

    The primitive operations (hide_cursor, save_position, write, ...) assume
    the caller already holds ``lock``. The frame methods take it themselves.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()
        # Not an RLock: a signal handler running on top of a frame in the
        # same thread must find it taken.
        self.lock = threading.Lock()
        self._finished = False

    @property
    def is_terminal(self) -> bool:
        return self.console.is_terminal

    @property
    def finished(self) -> bool:
        """True once the cursor has been restored and the final newline written."""
        return self._finished

    # --- primitives (caller holds the lock) -------------------------------

    def hide_cursor(self) -> None:
        self.console.show_cursor(False)

    def show_cursor(self) -> None:
        self.console.show_cursor(True)

    def save_position(self) -> None:
        self._control(SAVE_CURSOR)

    def restore_position(self) -> None:
        self._control(RESTORE_CURSOR)

    def clear_down(self) -> None:
        self._control(ERASE_DOWN)

    def write(self, text: str) -> None:
        self.console.file.write(text)

    def flush(self) -> None:
        self.console.file.flush()

    def _control(self, code: str) -> None:
        # Same gating Rich applies to its own control codes.
        if self.is_terminal:
            self.console.file.write(code)

    # --- frames -----------------------------------------------------------

    def hide(self) -> None:
        """Hide the cursor ahead of the first frame. No-op after cleanup."""
        with self.lock:
            if not self._finished:
                self.hide_cursor()

    def draw(self, text: str) -> bool:
        """Redraw ``text`` in place. Returns False, writing nothing, after cleanup.

        Clearing everything below the cursor removes leftovers from a longer
        previous frame. When output is not a terminal there is nothing to
        redraw in place, so each frame goes on its own line instead.
        """
        with self.lock:
            # Once the final newline is out, nothing may follow it.
            if self._finished:
                return False
            if self.is_terminal:
                self.save_position()
                self.clear_down()
                self.write(text)
                self.restore_position()
            else:
                self.write(text + "\n")
            self.flush()
            return True

    def finish(self) -> bool:
        """Show the cursor and end the line. Returns False if already done."""
        with self.lock:
            return self._finish()

    def try_finish(self) -> bool:
        """Non-blocking finish() for use from a signal handler.

        Returns False without touching the screen if the lock is held or the
        cleanup already happened. Write errors are ignored here; the loop's
        finish() then retries the cleanup and lets them propagate.
        """
        if not self.lock.acquire(blocking=False):
            return False
        try:
            return self._finish()
        except OSError:
            return False
        finally:
            self.lock.release()

    def _finish(self) -> bool:
        if self._finished:
            return False
        self.show_cursor()
        if self.is_terminal:
            self.write("\n")
        self.flush()
        self._finished = True
        return True
