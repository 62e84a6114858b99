"""Document Files — the only filesystem access in the package.

Invariants:
    - Source read and output written as UTF-8
    - Every OSError mapped to DocumentIOError (core/errors.py) with the path
    - Output parent directories created on write
"""

import logging
from pathlib import Path

from sidebyside.core.domain_types import Document
from sidebyside.core.errors import DocumentIOError
from sidebyside.core.parse_markdown import parse_document

logger = logging.getLogger(__name__)

_BUNDLED_DOCUMENT = Path(__file__).resolve().parent.parent / "content" / "csharp6_features.md"


def bundled_document_path() -> Path:
    """Sample comparison document shipped with the package."""
    return _BUNDLED_DOCUMENT


def read_document(path: str | Path) -> Document:
    """Read and parse a comparison document."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to read document: {e}", extra={"source_path": str(path)})
        raise DocumentIOError(e.strerror or str(e), str(path), "read") from e
    return parse_document(text)


def write_output(path: str | Path, text: str) -> Path:
    """Write rendered text, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        logger.error(f"Failed to write output: {e}", extra={"output_path": str(path)})
        raise DocumentIOError(e.strerror or str(e), str(path), "write") from e
    return path
