"""Live-filter curses front-end."""

import curses
import os
from typing import List, Optional, Union

from .commands import Book, execute
from .config import POLL_INTERVAL_MS, Config
from .core import filter_records
from .errors import ParseError
from .log import get_logger
from .models import Record, format_record
from .parser import parse_command
from .signals import CancelFlag, install_interrupt_handler, restore_handlers
from .terminal import RawMode

logger = get_logger(__name__)

PROMPT = "> "
# Raw mode delivers Ctrl-C as a key rather than raising SIGINT
CANCEL_KEY = 3
ENTER_KEYS = (10, 13, curses.KEY_ENTER)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)

STATUS_HINT = "Type to filter | Enter: run line | /help | Ctrl-C: quit"


class QueryBuffer:
    """Characters typed since the last committed line."""

    def __init__(self):
        self.chars: List[str] = []

    def append(self, ch: str) -> None:
        self.chars.append(ch)

    def backspace(self) -> bool:
        """Drop the last character. Returns False if there was nothing to drop."""
        if not self.chars:
            return False
        self.chars.pop()
        return True

    def clear(self) -> None:
        self.chars = []

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)


class TUI:
    """Curses live filter over one record book.

    run() is the outer loop: each pass snapshots the records, clears the
    query and hands over to poll(), the inner loop, which reads one key at a
    time with a bounded wait and repaints after every edit. Enter commits the
    query as a command line; Ctrl-C or an interrupt signal stops everything.
    """

    def __init__(
        self,
        screen,
        book: Book,
        flag: CancelFlag,
        poll_interval_ms: int = POLL_INTERVAL_MS,
        title: Optional[str] = None,
    ):
        self.screen = screen
        self.book = book
        self.flag = flag
        self.poll_interval_ms = poll_interval_ms
        self.title = title
        self.query = QueryBuffer()
        self.records: List[Record] = []
        self.results: List[Record] = []
        self.notice: List[str] = []
        self.status = STATUS_HINT

    def refilter(self) -> None:
        self.results = filter_records(self.records, self.query.text)

    def body_lines(self) -> List[str]:
        # Command output stays up until the user starts typing again
        if self.notice and not self.query.text:
            return self.notice
        if not self.results:
            return ["    (none)"]
        return [format_record(r) for r in self.results]

    def draw(self) -> None:
        """Render prompt, results and status line; leave the cursor after the query."""
        self.screen.erase()
        height, width = self.screen.getmaxyx()

        prompt_line = PROMPT + self.query.text
        self.screen.addnstr(0, 0, prompt_line, width - 1, curses.A_BOLD)

        top = 1
        body_h = height - top - 2
        if body_h >= 1:
            for i, line in enumerate(self.body_lines()[:body_h]):
                self.screen.addnstr(top + i, 0, line, width - 1)

            counts = f"{len(self.results)}/{len(self.records)}"
            if self.title:
                counts = f"{self.title}  {counts}"
            self.screen.hline(height - 2, 0, ord("-"), width)
            self.screen.addnstr(
                height - 1, 0, f"{counts} | {self.status}", width - 1, curses.A_DIM
            )

        self.screen.move(0, min(len(prompt_line), width - 1))
        self.screen.refresh()

    def update(self) -> None:
        """Re-filter and repaint; a failed terminal write is logged, not fatal."""
        self.refilter()
        try:
            self.draw()
        except curses.error as e:
            logger.warning("Redraw failed: %s", e)

    def read_key(self) -> Union[str, int, None]:
        """Next key: a str for a printable character, an int for control and
        special keys, or None when the wait times out."""
        try:
            key = self.screen.get_wch()
        except curses.error:
            return None
        if isinstance(key, str) and not key.isprintable():
            return ord(key)
        return key

    def poll(self) -> Optional[str]:
        """Inner loop. Returns the committed query, or None once cancelled."""
        self.screen.timeout(self.poll_interval_ms)
        while True:
            if self.flag.stopped:
                return None

            key = self.read_key()
            if key is None:
                continue
            if key == CANCEL_KEY:
                self.flag.stop()
                return None
            if key in ENTER_KEYS:
                return self.query.text

            if key in BACKSPACE_KEYS:
                if self.query.backspace():
                    self.update()
            elif isinstance(key, str):
                self.query.append(key)
                self.update()

    def handle_line(self, line: str) -> bool:
        """Dispatch a committed line. Returns True when the session should end."""
        try:
            outcome = execute(self.book, parse_command(line))
        except ParseError as e:
            logger.info("Rejected input %r: %s", line, e)
            self.notice = [f"Error processing input: {e}"]
            return False
        self.notice = outcome.lines
        return outcome.quit

    def run(self) -> None:
        """Outer loop: one pass per committed line until quit or cancelled."""
        while not self.flag.stopped:
            self.records = list(self.book.records)
            self.query.clear()
            self.update()

            line = self.poll()
            if line is None:
                logger.info("Cancelled")
                break
            if self.handle_line(line):
                logger.info("Quit requested")
                break


def run_session(
    book: Book,
    config: Config,
    flag: Optional[CancelFlag] = None,
    guard: Optional[RawMode] = None,
) -> None:
    """Hold raw mode and the interrupt handler around one TUI run."""
    flag = flag if flag is not None else CancelFlag()
    guard = guard if guard is not None else RawMode()

    previous = install_interrupt_handler(flag)
    try:
        with guard as screen:
            TUI(
                screen,
                book,
                flag,
                poll_interval_ms=config.poll_interval_ms,
                title=os.path.basename(config.path),
            ).run()
    finally:
        restore_handlers(previous)


def main(book: Book, config: Config) -> None:
    """TUI entry point."""
    run_session(book, config)
