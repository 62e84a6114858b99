"""Entry Store — immutable, ordered holder of topic entries.

Invariants:
    - Entries kept as a tuple in document order; no mutation after construction
    - Titles are unique (DuplicateTitleError at construction)
    - find_by_title is exact and case-sensitive; misses raise EntryNotFoundError
    - get_all() never fails

Design Decisions:
    - Title index built once in __init__: lookups never scan
    - Blank titles are not indexed; rendering reports them as missing_title
"""

from collections.abc import Iterable, Iterator

from sidebyside.core.domain_types import Document, TopicEntry
from sidebyside.core.errors import (
    DuplicateTitleError, EntryNotFoundError, EntryPositionError,
)
from sidebyside.core.validate_entry import find_duplicate_titles


class EntryStore:
    """Read-only access to entries by position or exact title."""

    __slots__ = ("_entries", "_by_title")

    def __init__(self, entries: Iterable[TopicEntry]):
        entries = tuple(entries)
        duplicates = find_duplicate_titles(entries)
        if duplicates:
            title, positions = next(iter(duplicates.items()))
            raise DuplicateTitleError(title, positions)
        self._entries = entries
        self._by_title = {e.title: e for e in entries if e.title.strip()}

    @classmethod
    def from_document(cls, document: Document) -> "EntryStore":
        return cls(document.entries)

    def get_all(self) -> tuple[TopicEntry, ...]:
        """The ordered sequence of entries."""
        return self._entries

    def find_by_title(self, title: str) -> TopicEntry:
        """Entry whose title equals `title` exactly."""
        try:
            return self._by_title[title]
        except KeyError:
            raise EntryNotFoundError(title) from None

    def get(self, position: int) -> TopicEntry:
        if position < 0 or position >= len(self._entries):
            raise EntryPositionError(position, len(self._entries))
        return self._entries[position]

    def titles(self) -> list[str]:
        return [entry.title for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TopicEntry]:
        return iter(self._entries)

    def __contains__(self, title: object) -> bool:
        return title in self._by_title
