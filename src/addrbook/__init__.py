"""addrbook - a small phone directory with a live-filter terminal front-end."""

__version__ = "1.0.0"

from .models import Record, Name, Company, Both, DEFAULT_PATH, format_record
from .errors import AddrbookError, TerminalError, ParseError, SignalSetupError
from .core import matches, filter_records
from .parser import Command, tokenize, parse_command
from .storage import read_file, write_file

__all__ = [
    "Record",
    "Name",
    "Company",
    "Both",
    "DEFAULT_PATH",
    "format_record",
    "AddrbookError",
    "TerminalError",
    "ParseError",
    "SignalSetupError",
    "matches",
    "filter_records",
    "Command",
    "tokenize",
    "parse_command",
    "read_file",
    "write_file",
]
