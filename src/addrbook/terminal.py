"""Raw terminal mode, held for the lifetime of the live front-end."""

import curses
import sys
from typing import Optional

from .errors import TerminalError
from .log import get_logger

logger = get_logger(__name__)

# The one guard currently holding the terminal, if any.
_live: Optional["RawMode"] = None


class RawMode:
    """Scoped raw-mode guard.

    acquire() initialises curses with line buffering, echo and signal keys
    turned off and returns the screen. release() puts the terminal back the
    way it was; it runs its restore steps at most once per acquisition and
    never raises. Only one guard may be held per process.

    Use as a context manager so release() runs on every way out of the block:

        with RawMode() as screen:
            ...
    """

    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self.screen = None
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self):
        global _live
        if _live is not None:
            raise TerminalError("raw mode is already held by another guard")
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None or not isatty():
            raise TerminalError("standard input is not a terminal")

        try:
            self.screen = curses.initscr()
        except curses.error as e:
            raise TerminalError(f"cannot initialise terminal: {e}") from e

        self._active = True
        _live = self
        try:
            curses.raw()
            curses.noecho()
            self.screen.keypad(True)
        except curses.error as e:
            self.release()
            raise TerminalError(f"cannot enter raw mode: {e}") from e

        logger.debug("Raw mode acquired")
        return self.screen

    def release(self) -> None:
        global _live
        if not self._active:
            return
        self._active = False
        if _live is self:
            _live = None

        steps = (
            ("keypad", lambda: self.screen.keypad(False)),
            ("noraw", curses.noraw),
            ("echo", curses.echo),
            ("endwin", curses.endwin),
        )
        for name, step in steps:
            try:
                step()
            except curses.error as e:
                logger.warning("Terminal restore step %s failed: %s", name, e)
        logger.debug("Raw mode released")

    def __enter__(self):
        return self.acquire()

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False
