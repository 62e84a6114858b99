"""Entry Routes — read-only access to the entry store.

Invariants:
    - List order is EntryStore.get_all() order
    - Title lookup is exact (EntryStore.find_by_title); misses → 404 envelope
    - Every path below /api/v1/entries/ is a title, so positional lookup lives
      under its own prefix (/api/v1/positions)
    - No write endpoints
"""

from fastapi import APIRouter, Depends

from sidebyside.infrastructure.document_source import DocumentSource, get_document_source
from sidebyside.schemas.entry import EntryListResponse, EntryResponse

router = APIRouter(prefix="/api/v1/entries", tags=["entries"])
positions_router = APIRouter(prefix="/api/v1/positions", tags=["entries"])


@router.get("", response_model=EntryListResponse)
async def list_entries(source: DocumentSource = Depends(get_document_source)):
    entries = source.store.get_all()
    return EntryListResponse(
        title=source.document.title,
        count=len(entries),
        entries=[EntryResponse.from_entry(e, i) for i, e in enumerate(entries)],
    )


@router.get("/{title:path}", response_model=EntryResponse)
async def get_entry(
    title: str, source: DocumentSource = Depends(get_document_source),
):
    """Entry whose title matches exactly (case-sensitive)."""
    entry = source.store.find_by_title(title)
    return EntryResponse.from_entry(entry, source.store.titles().index(title))


@positions_router.get("/{position}", response_model=EntryResponse)
async def get_entry_at(
    position: int, source: DocumentSource = Depends(get_document_source),
):
    """Entry by zero-based position."""
    return EntryResponse.from_entry(source.store.get(position), position)
