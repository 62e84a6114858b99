"""Markdown Rendering — serializes a document into the comparison markup.

Invariants:
    - Output is the same format parse_markdown reads (round-trip safe)
    - Entry template: ## title, description, ### New syntax, ### Old syntax, > note
    - Empty samples render as NO_EQUIVALENT_MARKER, never as an empty fence
    - Fence is longer than any backtick run inside the sample
    - Prose lines that would read as headings or stray fences are escaped with a
      leading backslash; balanced fences inside prose are kept verbatim
"""

import re

import yaml

from sidebyside.core.domain_types import Document, FrontMatter, TopicEntry

NEW_SYNTAX_HEADING = "New syntax"
OLD_SYNTAX_HEADING = "Old syntax"
NO_EQUIVALENT_MARKER = "_No direct equivalent._"
NOTE_PREFIX = "**Note:**"

_BACKTICK_RUN = re.compile(r"`+")
FENCE_OPEN = re.compile(r"^ {0,3}(`{3,})[^`]*$")
FENCE_CLOSE = re.compile(r"^ {0,3}(`{3,})[ \t]*$")
_ESCAPABLE = re.compile(r"^\\*(?: {0,3}`{3}|#)")


def render_markdown(document: Document, entries: tuple[TopicEntry, ...]) -> str:
    """Render front matter, preamble and the given entries."""
    fm = document.front_matter
    parts = [_front_matter_block(fm), f"# {fm.title}"]
    if document.preamble.strip():
        parts.append(escape_prose(document.preamble.strip()))
    parts.extend(_entry_block(entry, fm.code_language) for entry in entries)
    return "\n\n".join(parts) + "\n"


def code_fence(code: str) -> str:
    """Backtick fence that cannot be closed from inside `code`."""
    longest = max((len(m.group(0)) for m in _BACKTICK_RUN.finditer(code)), default=0)
    return "`" * max(3, longest + 1)


def escape_prose(text: str) -> str:
    """Backslash-escape prose lines the parser would read as structure.

    Lines inside a balanced fence pass through untouched, as the parser
    keeps them verbatim too.
    """
    lines = text.splitlines()
    out: list[str] = []
    i = 0
    while i < len(lines):
        opening = FENCE_OPEN.match(lines[i])
        end = _fence_end(lines, i, opening.group(1)) if opening else None
        if end is not None:
            out.extend(lines[i:end + 1])
            i = end + 1
            continue
        line = lines[i]
        out.append("\\" + line if _ESCAPABLE.match(line) else line)
        i += 1
    return "\n".join(out)


def unescape_prose_line(line: str) -> str:
    """Inverse of escape_prose for a single line outside a fence."""
    if line.startswith("\\") and _ESCAPABLE.match(line):
        return line[1:]
    return line


def _fence_end(lines: list[str], start: int, fence: str) -> int | None:
    for j in range(start + 1, len(lines)):
        closing = FENCE_CLOSE.match(lines[j])
        if closing and len(closing.group(1)) >= len(fence):
            return j
    return None


def _front_matter_block(fm: FrontMatter) -> str:
    data = {"title": fm.title}
    for key in ("attribution", "license", "code_language"):
        value = getattr(fm, key)
        if value:
            data[key] = value
    dumped = yaml.safe_dump(
        data, sort_keys=False, allow_unicode=True, default_flow_style=False,
    )
    return f"---\n{dumped}---"


def _entry_block(entry: TopicEntry, language: str) -> str:
    parts = [f"## {entry.title}"]
    if entry.description.strip():
        parts.append(escape_prose(entry.description.strip()))
    parts.append(f"### {NEW_SYNTAX_HEADING}")
    parts.append(_code_block(entry.new_code, language))
    parts.append(f"### {OLD_SYNTAX_HEADING}")
    parts.append(_code_block(entry.old_code, language))
    if entry.has_notes:
        parts.append(_note_block(entry.notes))
    return "\n\n".join(parts)


def _code_block(code: str, language: str) -> str:
    if not code.strip():
        return NO_EQUIVALENT_MARKER
    body = code.strip("\n")
    fence = code_fence(body)
    return f"{fence}{language}\n{body}\n{fence}"


def _note_block(notes: str) -> str:
    lines = notes.strip().splitlines()
    quoted = [f"> {NOTE_PREFIX} {lines[0]}"]
    quoted.extend(f"> {line}" if line.strip() else ">" for line in lines[1:])
    return "\n".join(quoted)
