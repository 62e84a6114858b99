"""Render Dispatch — one entry point for every output format.

Invariants:
    - plan_render decides which entries are emitted (same rules for all formats)
    - Lenient mode: malformed entries skipped and returned in RenderResult.errors
    - Strict mode: RenderFailedError propagates, no text produced
"""

from collections.abc import Callable

from sidebyside.core.domain_types import Document, OutputFormat, TopicEntry
from sidebyside.core.render_markdown import render_markdown
from sidebyside.core.render_plan import RenderResult, plan_render
from sidebyside.services.render_html import render_html

_RENDERERS: dict[OutputFormat, Callable[[Document, tuple[TopicEntry, ...]], str]] = {
    OutputFormat.MARKDOWN: render_markdown,
    OutputFormat.HTML: render_html,
}


def render(
    document: Document,
    fmt: OutputFormat = OutputFormat.MARKDOWN,
    strict: bool = False,
) -> RenderResult:
    """Render the document to a single text artifact."""
    plan = plan_render(document, strict=strict)
    text = _RENDERERS[OutputFormat(fmt)](document, plan.entries)
    return RenderResult(
        text=text,
        errors=plan.errors,
        rendered_titles=tuple(entry.title for entry in plan.entries),
    )
