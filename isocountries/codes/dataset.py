"""ISO 3166-1 reference table: one [alpha2, alpha3, numeric] row per country.

Every value must be unique across the table.
Validated when a CodeIndex is built, via validate_no_duplicate_codes().
"""

import json
import logging
import re
from collections.abc import Iterable, Sequence
from typing import NamedTuple

from isocountries.config import settings

logger = logging.getLogger(__name__)

_ALPHA2 = re.compile(r"[A-Z]{2}")
_ALPHA3 = re.compile(r"[A-Z]{3}")
_NUMERIC = re.compile(r"[0-9]{3}")


class CodeEntry(NamedTuple):
    alpha2: str
    alpha3: str
    numeric: str


def parse_entries(rows: Iterable[Sequence[str]]) -> list[CodeEntry]:
    """Turn raw table rows into CodeEntry triples, rejecting malformed rows."""
    entries: list[CodeEntry] = []
    for i, row in enumerate(rows):
        if len(row) != 3:
            raise ValueError(f"Code table row {i} has {len(row)} fields, expected 3: {row!r}")
        entry = CodeEntry(*row)
        if not (
            all(isinstance(value, str) for value in entry)
            and _ALPHA2.fullmatch(entry.alpha2)
            and _ALPHA3.fullmatch(entry.alpha3)
            and _NUMERIC.fullmatch(entry.numeric)
        ):
            raise ValueError(f"Malformed code table row {i}: {row!r}")
        entries.append(entry)
    return entries


def validate_no_duplicate_codes(entries: Iterable[CodeEntry]) -> None:
    """Raise ValueError if any alpha-2, alpha-3 or numeric code appears twice."""
    seen: dict[str, dict[str, str]] = {field: {} for field in CodeEntry._fields}

    for entry in entries:
        for field, value in entry._asdict().items():
            if value in seen[field]:
                raise ValueError(
                    f"Duplicate {field} code '{value}': found for '{seen[field][value]}' "
                    f"and '{entry.alpha2}'"
                )
            seen[field][value] = entry.alpha2


def load_entries(path: str | None = None) -> list[CodeEntry]:
    """Read the code table (bundled codes.json by default)."""
    path = path or settings.codes_path
    with open(path, encoding="utf-8") as f:
        rows = json.load(f)

    entries = parse_entries(rows)
    logger.info("Loaded %d country code entries from %s", len(entries), path)
    return entries
