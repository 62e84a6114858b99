"""Document Route — the whole document rendered on request.

Invariants:
    - format selects Markdown or HTML; default HTML
    - X-Skipped-Entries header = number of malformed entries left out
    - strict=true with malformed entries → 422 RENDER_FAILED envelope
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from sidebyside.core.domain_types import OutputFormat
from sidebyside.infrastructure.document_source import DocumentSource, get_document_source
from sidebyside.services.render_document import render

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/document", tags=["document"])

_MEDIA_TYPES = {
    OutputFormat.MARKDOWN: "text/markdown; charset=utf-8",
    OutputFormat.HTML: "text/html; charset=utf-8",
}


@router.get("")
async def get_document(
    fmt: OutputFormat = Query(OutputFormat.HTML, alias="format"),
    strict: bool = Query(False),
    source: DocumentSource = Depends(get_document_source),
):
    result = render(source.document, fmt, strict=strict)
    for err in result.errors:
        logger.warning(
            f"Skipped entry: {err.message}",
            extra={"position": err.position, "error_code": err.code},
        )
    return Response(
        content=result.text,
        media_type=_MEDIA_TYPES[fmt],
        headers={"X-Skipped-Entries": str(len(result.errors))},
    )
