"""Line-oriented front-end: read a line, run it, print the result."""

import sys
from typing import Callable, Optional, TextIO

from .commands import Book, execute
from .errors import ParseError
from .log import get_logger
from .parser import parse_command

logger = get_logger(__name__)

PROMPT = "> "


def print_welcome(path: str, count: int, out: TextIO) -> None:
    width = 47
    rows = [
        "Welcome to the Address Book",
        "",
        f"Loading customers from : {path}",
        f"Total Customers: {count}",
        "",
        'Type "/help" for help',
    ]
    print("*" * width, file=out)
    for row in rows:
        print(f"* {row[: width - 4]:<{width - 4}} *", file=out)
    print("*" * width, file=out)


def run(
    book: Book,
    path: str,
    read: Optional[Callable[[str], str]] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Main loop. Ends on /quit, end of input or Ctrl-C at the prompt."""
    read = read if read is not None else input
    out = out if out is not None else sys.stdout
    print_welcome(path, len(book.records), out)

    while True:
        try:
            line = read(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            break

        try:
            outcome = execute(book, parse_command(line))
        except ParseError as e:
            logger.info("Rejected input %r: %s", line, e)
            print(f"Error processing input: {e}", file=out)
            continue

        for text in outcome.lines:
            print(text, file=out)
        if outcome.quit:
            break
