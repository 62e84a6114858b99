"""Document Source — loads the comparison document once and serves its store.

Invariants:
    - Document parsed and EntryStore built exactly once per DocumentSource
    - get_document_source() raises DocumentNotLoadedError before init
    - Store is immutable; concurrent readers never need locking

Design Decisions:
    - Singleton document_source initialized on startup: FastAPI lifespan manages
      lifecycle (ADR: no global import side effects)
"""

import logging
from pathlib import Path

from sidebyside.core.domain_types import Document
from sidebyside.core.entry_store import EntryStore
from sidebyside.core.errors import DocumentNotLoadedError
from sidebyside.infrastructure.document_files import read_document

logger = logging.getLogger(__name__)


class DocumentSource:
    """A parsed document plus its entry store."""

    def __init__(self, document: Document, path: Path | None = None):
        self.path = path
        self.document = document
        self.store = EntryStore.from_document(document)

    @classmethod
    def load(cls, path: str | Path) -> "DocumentSource":
        path = Path(path)
        source = cls(read_document(path), path)
        logger.info(
            f"Loaded '{source.document.title}' with {len(source.store)} entries",
            extra={"source_path": str(path)},
        )
        return source

    def health_check(self) -> bool:
        return len(self.store) > 0


# Singleton (initialized on startup)
document_source: DocumentSource | None = None


def init_document_source(path: str | Path) -> DocumentSource:
    global document_source
    document_source = DocumentSource.load(path)
    return document_source


def get_document_source() -> DocumentSource:
    """FastAPI dependency for the loaded document."""
    if document_source is None:
        raise DocumentNotLoadedError()
    return document_source
