"""File I/O for addrbook record files."""

import json
import os
from typing import Any, Dict, List, Optional

from .log import get_logger
from .models import Both, Company, Name, Record

logger = get_logger(__name__)


def record_from_dict(data: Dict[str, Any]) -> Optional[Record]:
    """Build a Record from a JSON object.

    Returns None if it has no identifier, or if name or company is not text.
    """
    name = data.get("name")
    company = data.get("company")
    for value in (name, company):
        if value is not None and not isinstance(value, str):
            return None
    phone = str(data.get("phone", ""))
    if name and company:
        return Record(Both(company=company, name=name), phone)
    if name:
        return Record(Name(name), phone)
    if company:
        return Record(Company(company), phone)
    return None


def record_to_dict(record: Record) -> Dict[str, str]:
    ident = record.ident
    if isinstance(ident, Both):
        return {"name": ident.name, "company": ident.company, "phone": record.phone}
    if isinstance(ident, Company):
        return {"company": ident.company, "phone": record.phone}
    return {"name": ident.name, "phone": record.phone}


def read_file(path: str) -> List[Record]:
    """Load records from a JSON file.

    Creates the file with an empty list if it does not exist. Entries with
    neither a name nor a company are skipped.

    Raises OSError if the file cannot be read and ValueError if it is not a
    JSON array.
    """
    if not os.path.exists(path):
        ensure_file_exists(path)
        return []

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of records")

    records: List[Record] = []
    for i, item in enumerate(data):
        record = record_from_dict(item) if isinstance(item, dict) else None
        if record is None:
            logger.warning("Skipping entry %d in %s: no usable name or company", i, path)
            continue
        records.append(record)
    logger.info("Loaded %d records from %s", len(records), path)
    return records


def write_file(path: str, records: List[Record]) -> None:
    """Rewrite the file from in-memory records."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump([record_to_dict(r) for r in records], f, indent=2)
        f.write("\n")
    logger.info("Saved %d records to %s", len(records), path)


def ensure_file_exists(path: str) -> None:
    """Ensure the directory and file exist, starting with an empty list."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8") as f:
            f.write("[]\n")
