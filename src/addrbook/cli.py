"""addrbook command-line interface."""

import argparse
import sys
from typing import List, Optional

from .commands import Book
from .config import POLL_INTERVAL_MS, Config, default_path
from .errors import SignalSetupError, TerminalError
from .log import get_logger, setup_logging
from .models import DEFAULT_LOG_PATH
from .storage import ensure_file_exists, read_file, write_file

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    default = default_path()
    p = argparse.ArgumentParser(
        prog="addrbook", description="Very simple command line phone directory."
    )
    p.add_argument(
        "-f",
        "--file",
        default=default,
        help=f"Path to the customers file (default: {default})",
    )
    p.add_argument(
        "--plain",
        action="store_true",
        help="Use the line prompt instead of the live filter",
    )
    p.add_argument(
        "--poll-ms",
        type=int,
        default=POLL_INTERVAL_MS,
        help=f"Key wait before re-checking for cancel (default: {POLL_INTERVAL_MS})",
    )
    p.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: INFO)",
    )
    p.add_argument(
        "--log-file",
        default=DEFAULT_LOG_PATH,
        help=f"Log file, empty to disable (default: {DEFAULT_LOG_PATH})",
    )
    return p


def load_book(path: str) -> Optional[Book]:
    """Load the record file, or None if it could not be read."""
    try:
        ensure_file_exists(path)
        return Book(read_file(path))
    except (OSError, ValueError) as e:
        logger.error("Error loading customers from %s: %s", path, e)
        print(f"Error loading customers: {e}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point. Launches the live filter unless --plain is given."""
    args = build_parser().parse_args(argv)
    config = Config.from_args(args)
    try:
        setup_logging(config.log_level, config.log_file)
    except OSError as e:
        print(f"addrbook: cannot open log file: {e}", file=sys.stderr)
        return 1

    book = load_book(config.path)
    loaded = book is not None
    if book is None:
        # Start empty but leave the unreadable file alone
        book = Book()

    try:
        if config.plain:
            from .repl import run as repl_run

            repl_run(book, config.path)
        else:
            from .tui import main as tui_main

            tui_main(book, config)
    except (TerminalError, SignalSetupError) as e:
        logger.error("Startup failed: %s", e)
        print(f"addrbook: {e}", file=sys.stderr)
        return 1

    if book.dirty and loaded:
        try:
            write_file(config.path, book.records)
        except OSError as e:
            logger.error("Error saving customers to %s: %s", config.path, e)
            print(f"Error saving customers: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
