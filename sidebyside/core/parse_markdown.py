"""Markdown Parsing — reads the comparison markup back into a Document.

Invariants:
    - Headings inside code fences are code, never structure
    - `## ` opens an entry; `### New syntax` / `### Old syntax` hold one fence each
    - NO_EQUIVALENT_MARKER or a missing fence means an empty sample
    - Block-quoted lines inside a syntax section are the entry's notes
    - Structural errors raise DocumentParseError with a 1-based line number
    - No entry validation here; render and EntryStore own that
    - Backslash-escaped prose lines (see escape_prose) are restored outside fences

Design Decisions:
    - Line-based scanner over a Markdown AST library: only the subset emitted by
      render_markdown needs to be understood, and fences must stay byte-exact
    - Front matter is YAML (PyYAML safe_load), unknown keys ignored
"""

import re
from dataclasses import dataclass, field

import yaml

from sidebyside.core.domain_types import Document, FrontMatter, TopicEntry
from sidebyside.core.errors import DocumentParseError
from sidebyside.core.render_markdown import (
    FENCE_CLOSE, FENCE_OPEN, NEW_SYNTAX_HEADING, NO_EQUIVALENT_MARKER, NOTE_PREFIX,
    OLD_SYNTAX_HEADING, unescape_prose_line,
)

_H1 = re.compile(r"^#[ \t]+(.*?)[ \t]*$")
_H2 = re.compile(r"^##(?:[ \t]+(.*?))?[ \t]*$")
_H3 = re.compile(r"^###(?:[ \t]+(.*?))?[ \t]*$")

_SECTIONS = {
    NEW_SYNTAX_HEADING.lower(): "new",
    OLD_SYNTAX_HEADING.lower(): "old",
}


@dataclass
class _EntryDraft:
    title: str
    line: int
    description: list[str] = field(default_factory=list)
    code: dict[str, list[str] | None] = field(default_factory=dict)
    notes: list[str] = field(default_factory=list)

    def build(self) -> TopicEntry:
        return TopicEntry(
            title=self.title,
            description="\n".join(self.description).strip(),
            new_code="\n".join(self.code.get("new") or []),
            old_code="\n".join(self.code.get("old") or []),
            notes=_clean_notes(self.notes),
        )


def parse_document(text: str) -> Document:
    """Parse comparison markup into an (unvalidated) Document."""
    lines = text.splitlines()
    meta, start = _split_front_matter(lines)

    h1_title: str | None = None
    preamble: list[str] = []
    drafts: list[_EntryDraft] = []
    section = "preamble"
    fence: str | None = None
    fence_line = 0
    code_buffer: list[str] = []

    for index in range(start, len(lines)):
        line = lines[index]
        lineno = index + 1

        if fence is not None:
            closing = FENCE_CLOSE.match(line)
            if closing and len(closing.group(1)) >= len(fence):
                fence = None
                if section in _SECTIONS.values():
                    drafts[-1].code[section] = code_buffer
                else:
                    _prose(section, preamble, drafts).append(line)
                continue
            if section in _SECTIONS.values():
                code_buffer.append(line)
            else:
                _prose(section, preamble, drafts).append(line)
            continue

        opening = FENCE_OPEN.match(line)
        if opening:
            fence, fence_line = opening.group(1), lineno
            if section in _SECTIONS.values():
                if drafts[-1].code.get(section) is not None:
                    raise DocumentParseError(
                        f"more than one code sample in '{drafts[-1].title}'", lineno,
                    )
                code_buffer = []
            else:
                _prose(section, preamble, drafts).append(line)
            continue

        h2 = _H2.match(line)
        if h2:
            drafts.append(_EntryDraft(title=h2.group(1) or "", line=lineno))
            section = "description"
            continue

        h3 = _H3.match(line)
        if h3:
            if not drafts:
                raise DocumentParseError("syntax section outside of an entry", lineno)
            name = (h3.group(1) or "").strip()
            section_key = _SECTIONS.get(name.lower())
            if section_key is None:
                raise DocumentParseError(f"unknown section '{name}'", lineno)
            if section_key in drafts[-1].code:
                raise DocumentParseError(
                    f"section '{name}' repeated in '{drafts[-1].title}'", lineno,
                )
            drafts[-1].code[section_key] = None
            section = section_key
            continue

        if section == "preamble":
            h1 = _H1.match(line)
            if h1 and h1_title is None:
                h1_title = h1.group(1)
                continue
            preamble.append(unescape_prose_line(line))
        elif section == "description":
            drafts[-1].description.append(unescape_prose_line(line))
        else:
            _section_line(drafts[-1], section, line, lineno)

    if fence is not None:
        raise DocumentParseError("code fence is never closed", fence_line)

    title = meta.get("title") or h1_title
    if not title:
        raise DocumentParseError("document has no title")
    front_matter = FrontMatter(
        title=title,
        attribution=meta.get("attribution", ""),
        license=meta.get("license", ""),
        code_language=meta.get("code_language", ""),
    )
    return Document(
        front_matter=front_matter,
        entries=tuple(d.build() for d in drafts),
        preamble="\n".join(preamble).strip(),
    )


def _split_front_matter(lines: list[str]) -> tuple[dict[str, str], int]:
    """Parse a leading `---` YAML block. Returns (metadata, first body index)."""
    if not lines or lines[0].strip() != "---":
        return {}, 0
    for end in range(1, len(lines)):
        if lines[end].strip() == "---":
            break
    else:
        raise DocumentParseError("front matter is never closed", 1)
    try:
        data = yaml.safe_load("\n".join(lines[1:end]))
    except yaml.YAMLError as e:
        raise DocumentParseError(f"invalid front matter: {e}", 1) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DocumentParseError("front matter must be a mapping", 1)
    meta = {
        key: str(value) for key, value in data.items()
        if key in ("title", "attribution", "license", "code_language")
        and value is not None
    }
    return meta, end + 1


def _prose(section: str, preamble: list[str], drafts: list[_EntryDraft]) -> list[str]:
    return preamble if section == "preamble" else drafts[-1].description


def _section_line(draft: _EntryDraft, section: str, line: str, lineno: int) -> None:
    stripped = line.strip()
    if not stripped:
        return
    if stripped.startswith(">"):
        body = stripped[1:]
        draft.notes.append(body[1:] if body.startswith(" ") else body)
        return
    if stripped == NO_EQUIVALENT_MARKER and not draft.code.get(section):
        draft.code[section] = []
        return
    raise DocumentParseError(
        f"unexpected text in '{draft.title}' ({section} syntax section)", lineno,
    )


def _clean_notes(lines: list[str]) -> str:
    notes = "\n".join(lines).strip()
    if notes.startswith(NOTE_PREFIX):
        notes = notes[len(NOTE_PREFIX):].strip()
    return notes
