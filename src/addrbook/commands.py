"""Command dispatch shared by the live and line front-ends."""

from dataclasses import dataclass, field
from typing import List

from .core import filter_records, remove_matching
from .errors import ParseError
from .log import get_logger
from .models import Both, Company, Name, Record, format_record
from .parser import Command

logger = get_logger(__name__)

HELP_TEXT = [
    "USAGE:",
    '/list                        List all customers',
    '/add "name" "phone"          Add a customer with "name" as name and "phone" as phone',
    '/add "name" "phone" "co"     Add a contact person "name" at company "co"',
    '/add - "phone" "co"          Add a company with no contact person',
    '/delete "foo"                Delete all customers matching "foo"',
    "/help                        This help screen",
    "/quit                        Quit the program",
    'foo                          Search for all customers matching "foo"',
]


@dataclass
class Book:
    """The in-memory record set plus whether it needs saving."""

    records: List[Record] = field(default_factory=list)
    dirty: bool = False


@dataclass
class Outcome:
    """What a command printed, and whether the session should end."""

    lines: List[str] = field(default_factory=list)
    quit: bool = False


def cmd_list(book: Book, args: List[str]) -> Outcome:
    lines = ["All Customers:"]
    lines.extend(format_record(r) for r in book.records)
    if not book.records:
        lines.append("    (none)")
    return Outcome(lines)


def cmd_search(book: Book, args: List[str]) -> Outcome:
    query = " ".join(args)
    found = filter_records(book.records, query)
    lines = ["Search Results:"]
    lines.extend(format_record(r) for r in found)
    if not found:
        lines.append("    (none)")
    return Outcome(lines)


def cmd_add(book: Book, args: List[str]) -> Outcome:
    if len(args) == 2:
        name, phone = args
        record = Record(Name(name), phone)
    elif len(args) == 3:
        name, phone, company = args
        if name == "-":
            record = Record(Company(company), phone)
        else:
            record = Record(Both(company=company, name=name), phone)
    else:
        raise ParseError('usage: /add "name" "phone" ["company"]')

    book.records.append(record)
    book.dirty = True
    logger.info("Added record %r", record)
    return Outcome([f"Added:{format_record(record)}"])


def cmd_delete(book: Book, args: List[str]) -> Outcome:
    if not args:
        raise ParseError('usage: /delete "query"')
    query = " ".join(args)
    kept, removed = remove_matching(book.records, query)
    if removed:
        book.records = kept
        book.dirty = True
        logger.info("Deleted %d records matching %r", len(removed), query)
    lines = [f"Deleted {len(removed)} customer(s):"]
    lines.extend(format_record(r) for r in removed)
    return Outcome(lines)


def cmd_help(book: Book, args: List[str]) -> Outcome:
    return Outcome(list(HELP_TEXT))


def cmd_quit(book: Book, args: List[str]) -> Outcome:
    return Outcome(quit=True)


HANDLERS = {
    "list": cmd_list,
    "search": cmd_search,
    "add": cmd_add,
    "delete": cmd_delete,
    "help": cmd_help,
    "quit": cmd_quit,
}


def execute(book: Book, command: Command) -> Outcome:
    """Run a parsed command against the book.

    Raises ParseError when the arguments do not fit the command.
    """
    return HANDLERS[command.name](book, command.args)
