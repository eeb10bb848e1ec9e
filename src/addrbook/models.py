"""Data models and constants for addrbook."""

import os
from dataclasses import dataclass
from typing import Tuple, Union

DEFAULT_DIR = os.path.expanduser("~/.addrbook")
DEFAULT_PATH = os.path.join(DEFAULT_DIR, "customers.json")
DEFAULT_LOG_PATH = os.path.join(DEFAULT_DIR, "addrbook.log")


@dataclass(frozen=True)
class Name:
    """A person known only by name."""

    name: str


@dataclass(frozen=True)
class Company:
    """A company with no contact person."""

    company: str


@dataclass(frozen=True)
class Both:
    """A contact person at a company."""

    company: str
    name: str


Ident = Union[Name, Company, Both]


@dataclass(frozen=True)
class Record:
    """A single directory entry: one identifier shape plus a phone number."""

    ident: Ident
    phone: str

    def fields(self) -> Tuple[str, ...]:
        """Return the searchable text fields of the active shape."""
        if isinstance(self.ident, Both):
            return (self.ident.company, self.ident.name)
        if isinstance(self.ident, Company):
            return (self.ident.company,)
        return (self.ident.name,)

    @property
    def label(self) -> str:
        if isinstance(self.ident, Both):
            return f"{self.ident.name} ({self.ident.company})"
        if isinstance(self.ident, Company):
            return self.ident.company
        return self.ident.name


def format_record(record: Record) -> str:
    """Display line for a record: '    <label> Phone: <phone>'."""
    return f"    {record.label} Phone: {record.phone}"
