"""Entry Schemas — Pydantic response models for the read-only API.

Invariants:
    - Response models mirror core dataclasses field-for-field (no derived data hidden)
    - position is the zero-based index in document order
"""

from pydantic import BaseModel, Field

from sidebyside.core.domain_types import TopicEntry


class EntryResponse(BaseModel):
    """One topic entry with its document position."""
    position: int = Field(ge=0)
    title: str
    description: str
    new_code: str
    old_code: str
    notes: str = ""

    @classmethod
    def from_entry(cls, entry: TopicEntry, position: int) -> "EntryResponse":
        return cls(
            position=position,
            title=entry.title,
            description=entry.description,
            new_code=entry.new_code,
            old_code=entry.old_code,
            notes=entry.notes,
        )


class EntryListResponse(BaseModel):
    title: str
    count: int
    entries: list[EntryResponse]
