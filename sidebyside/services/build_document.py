"""Build Pass — read the source, render it, write the artifact.

Invariants:
    - Single read-then-write pass; the output file is written at most once
    - Every skipped malformed entry is logged with its position and title
    - Strict mode: RenderFailedError propagates and nothing is written
    - Duplicate titles and parse errors propagate before anything is written
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from sidebyside.core.domain_types import OutputFormat
from sidebyside.core.errors import MalformedEntryError
from sidebyside.infrastructure.document_files import read_document, write_output
from sidebyside.infrastructure.observability import error_extra
from sidebyside.services.render_document import render

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BuildReport:
    output_path: Path
    format: OutputFormat
    entries_total: int
    entries_rendered: int
    errors: tuple[MalformedEntryError, ...] = ()

    @property
    def entries_skipped(self) -> int:
        return len(self.errors)


def build_document(
    source_path: str | Path,
    output_path: str | Path,
    fmt: OutputFormat = OutputFormat.HTML,
    strict: bool = False,
) -> BuildReport:
    """Render `source_path` into `output_path` in the requested format."""
    fmt = OutputFormat(fmt)
    document = read_document(source_path)
    result = render(document, fmt, strict=strict)

    for err in result.errors:
        logger.warning(f"Skipped entry: {err.message}", extra=error_extra(err))

    written = write_output(output_path, result.text)
    logger.info(
        f"Rendered '{document.title}' to {written}",
        extra={
            "source_path": str(source_path),
            "output_path": str(written),
            "output_format": fmt.value,
            "entries_rendered": len(result.rendered_titles),
            "entries_skipped": len(result.errors),
        },
    )
    return BuildReport(
        output_path=written,
        format=fmt,
        entries_total=len(document.entries),
        entries_rendered=len(result.rendered_titles),
        errors=result.errors,
    )
