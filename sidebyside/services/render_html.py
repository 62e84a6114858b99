"""HTML Rendering — side-by-side page from the packaged Jinja2 template.

Invariants:
    - Autoescaping on: titles, prose and code samples are always escaped
    - Section anchors are unique slugs derived from titles
    - Entry titles appear once each (in their <h2>), in the order given
"""

import re

from jinja2 import Environment, PackageLoader, select_autoescape

from sidebyside.core.domain_types import Document, TopicEntry
from sidebyside.core.render_markdown import NEW_SYNTAX_HEADING, OLD_SYNTAX_HEADING

_TEMPLATE = "document.html"
_NON_SLUG = re.compile(r"[^a-z0-9]+")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")

jinja_env = Environment(
    loader=PackageLoader("sidebyside", "templates"),
    autoescape=select_autoescape(["html", "xml"]),
    keep_trailing_newline=True,
)


def render_html(document: Document, entries: tuple[TopicEntry, ...]) -> str:
    template = jinja_env.get_template(_TEMPLATE)
    language = document.front_matter.code_language
    return template.render(
        front_matter=document.front_matter,
        preamble=paragraphs(document.preamble),
        entries=[
            {"entry": entry, "anchor": anchor, "description": paragraphs(entry.description)}
            for entry, anchor in zip(entries, anchors(entries))
        ],
        new_heading=NEW_SYNTAX_HEADING,
        old_heading=OLD_SYNTAX_HEADING,
        code_class=f"language-{language}" if language else "",
    )


def slugify(title: str) -> str:
    return _NON_SLUG.sub("-", title.lower()).strip("-") or "entry"


def anchors(entries: tuple[TopicEntry, ...]) -> list[str]:
    """Unique slug per entry; collisions get -2, -3, ... suffixes."""
    used: set[str] = set()
    result = []
    for entry in entries:
        base = slugify(entry.title)
        anchor, n = base, 1
        while anchor in used:
            n += 1
            anchor = f"{base}-{n}"
        used.add(anchor)
        result.append(anchor)
    return result


def paragraphs(text: str) -> list[str]:
    return [p.strip() for p in _PARAGRAPH_BREAK.split(text.strip()) if p.strip()]
