"""Entry Validation — structural checks for topic entries.

Invariants:
    - Title must be non-blank, single-line, without surrounding whitespace
    - At least one code sample must be non-blank (notes do not replace both)
    - A single empty sample is accepted only when notes document it
    - Returns MalformedEntryError (not raised) so callers decide lenient vs strict
    - Blank titles never count as duplicates (they are reported as missing)

Design Decisions:
    - Pure functions: no IO, no logging; renderer and build service report problems
    - Title comparison is exact and case-sensitive, matching EntryStore lookups
"""

from collections.abc import Iterable

from sidebyside.core.domain_types import Document, EntryProblem, TopicEntry
from sidebyside.core.errors import MalformedEntryError


def check_entry(entry: TopicEntry, position: int) -> MalformedEntryError | None:
    """Return the entry's structural problem, or None if it can be rendered."""
    if not entry.title.strip():
        return MalformedEntryError(position, EntryProblem.MISSING_TITLE, entry.title)
    if entry.title != entry.title.strip() or len(entry.title.splitlines()) > 1:
        return MalformedEntryError(position, EntryProblem.INVALID_TITLE, entry.title)
    if not entry.has_new_code and not entry.has_old_code:
        return MalformedEntryError(
            position, EntryProblem.MISSING_CODE_SAMPLES, entry.title,
        )
    if (entry.has_new_code != entry.has_old_code) and not entry.has_notes:
        return MalformedEntryError(
            position, EntryProblem.UNDOCUMENTED_EMPTY_SAMPLE, entry.title,
        )
    return None


def check_document(document: Document) -> list[MalformedEntryError]:
    """All entry problems in document order."""
    return [
        err for i, entry in enumerate(document.entries)
        if (err := check_entry(entry, i)) is not None
    ]


def find_duplicate_titles(entries: Iterable[TopicEntry]) -> dict[str, list[int]]:
    """Map each repeated non-blank title to the positions that use it."""
    seen: dict[str, list[int]] = {}
    for i, entry in enumerate(entries):
        if entry.title.strip():
            seen.setdefault(entry.title, []).append(i)
    return {title: positions for title, positions in seen.items() if len(positions) > 1}
