"""Render Plan — decides which entries a render may emit.

Invariants:
    - Entries keep get_all() order; malformed entries are dropped, never reordered
    - Every dropped entry is reported as a MalformedEntryError with its position
    - strict=True turns any problem into RenderFailedError (nothing rendered)
    - Duplicate titles raise DuplicateTitleError before any entry is checked

Design Decisions:
    - Selection separated from formatting: Markdown and HTML share one rule set
"""

from dataclasses import dataclass

from sidebyside.core.domain_types import Document, TopicEntry
from sidebyside.core.entry_store import EntryStore
from sidebyside.core.errors import MalformedEntryError, RenderFailedError
from sidebyside.core.validate_entry import check_entry


@dataclass(frozen=True)
class RenderPlan:
    entries: tuple[TopicEntry, ...]
    errors: tuple[MalformedEntryError, ...]


@dataclass(frozen=True)
class RenderResult:
    """Rendered text plus the entries that were left out."""
    text: str
    errors: tuple[MalformedEntryError, ...] = ()
    rendered_titles: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.errors


def plan_render(document: Document, strict: bool = False) -> RenderPlan:
    """Split the document's entries into renderable ones and problems."""
    store = EntryStore.from_document(document)
    entries: list[TopicEntry] = []
    errors: list[MalformedEntryError] = []
    for position, entry in enumerate(store.get_all()):
        problem = check_entry(entry, position)
        if problem is None:
            entries.append(entry)
        else:
            errors.append(problem)
    if strict and errors:
        raise RenderFailedError(errors)
    return RenderPlan(tuple(entries), tuple(errors))
