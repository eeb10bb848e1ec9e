"""Live filter helpers (pure functions, no I/O).

Filtering is a linear scan over an in-memory list. Directory sizes are small
enough that this runs on every keystroke without an index.
"""

from typing import Iterable, List, Tuple

from .models import Record


def matches(record: Record, query: str) -> bool:
    """Return True if the record matches the query, ignoring case.

    Name and company fields match on substring. The phone number matches
    only as a prefix: with Alice 1234567890, Acme 9876543210 and Bob
    10293848576, the query "9" must select Acme alone, and all three numbers
    contain a 9.
    """
    q = query.casefold()
    if not q:
        return True
    for field in record.fields():
        if q in field.casefold():
            return True
    return record.phone.casefold().startswith(q)


def filter_records(records: Iterable[Record], query: str) -> List[Record]:
    """Return the records matching query, in their original order."""
    return [r for r in records if matches(r, query)]


def remove_matching(
    records: Iterable[Record], query: str
) -> Tuple[List[Record], List[Record]]:
    """Split records into (kept, removed) by the filter rule."""
    kept: List[Record] = []
    removed: List[Record] = []
    for r in records:
        (removed if matches(r, query) else kept).append(r)
    return kept, removed
