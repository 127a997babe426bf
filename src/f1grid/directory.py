"""Directory pipeline: deduplicate, sort and filter driver records.

These are pure functions; they never mutate their input and always return
a new tuple.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from f1grid.models.driver import DriverRecord

DriverDirectory = tuple[DriverRecord, ...]

EMPTY_DIRECTORY: DriverDirectory = ()


def collation_key(text: str | None) -> str:
    """Return a locale-aware sort key for *text*.

    Accents are folded onto their base letter and case is ignored, so
    "Alpine", "alpine" and "Álpine" compare equal and sort before "Aston".
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return stripped.casefold()


def team_sort_key(text: str | None) -> tuple[str, str, str]:
    """Return the ordering key for a team name.

    Base letters decide first; on a tie the unaccented form sorts before the
    accented one, then lower case before upper case ("alpine" < "Alpine").
    """
    if not text:
        return ("", "", "")
    accented = unicodedata.normalize("NFD", text).casefold()
    return (collation_key(text), accented, text.swapcase())


def dedupe_drivers(records: Iterable[DriverRecord]) -> DriverDirectory:
    """Keep the first record seen for each driver number, in encounter order."""
    unique: dict[int, DriverRecord] = {}
    for record in records:
        if record.driver_number not in unique:
            unique[record.driver_number] = record
    return tuple(unique.values())


def sort_by_team(records: Iterable[DriverRecord]) -> DriverDirectory:
    """Sort records by team name; identical names keep their relative order."""
    return tuple(sorted(records, key=lambda r: team_sort_key(r.team_name)))


def build_directory(records: Iterable[DriverRecord]) -> DriverDirectory:
    """Deduplicate by driver number, then sort by team name."""
    return sort_by_team(dedupe_drivers(records))


def filter_drivers(directory: Iterable[DriverRecord], query: str | None) -> DriverDirectory:
    """Return entries whose full name or team name contains *query* (case-insensitive)."""
    entries = tuple(directory)
    if not query:
        return entries
    needle = query.lower()
    return tuple(
        d for d in entries
        if needle in (d.full_name or "").lower() or needle in (d.team_name or "").lower()
    )
