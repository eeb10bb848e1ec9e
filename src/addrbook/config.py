"""Configuration for addrbook."""

import argparse
import os
from dataclasses import dataclass
from typing import Optional

from .models import DEFAULT_LOG_PATH, DEFAULT_PATH

POLL_INTERVAL_MS = 500


def default_path() -> str:
    """Records file path: $ADDRBOOK_FILE if set, else ~/.addrbook/customers.json"""
    return os.path.expanduser(os.environ.get("ADDRBOOK_FILE") or DEFAULT_PATH)


@dataclass
class Config:
    """Settings for one addrbook session."""

    path: str = DEFAULT_PATH

    # Bounded wait for a key before the cancel flag is checked again
    poll_interval_ms: int = POLL_INTERVAL_MS

    # Line REPL instead of the live filter
    plain: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = DEFAULT_LOG_PATH

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        return cls(
            path=os.path.expanduser(args.file),
            poll_interval_ms=max(1, args.poll_ms),
            plain=args.plain,
            log_level=args.log_level,
            log_file=os.path.expanduser(args.log_file) if args.log_file else None,
        )
