"""Document file tests — bundled sample, reading, writing.

Tests cover:
    - Bundled C# 6 document parses, validates, and supports exact lookups
    - Bundled document survives a render → parse round trip unchanged
    - write_output creates parent directories
"""

import pytest

from sidebyside.core.entry_store import EntryStore
from sidebyside.core.errors import DocumentIOError, EntryNotFoundError
from sidebyside.core.parse_markdown import parse_document
from sidebyside.core.validate_entry import check_document
from sidebyside.infrastructure.document_files import (
    bundled_document_path, read_document, write_output,
)
from sidebyside.services.render_document import render


@pytest.fixture
def bundled():
    return read_document(bundled_document_path())


def test_bundled_document_is_well_formed(bundled):
    assert bundled.front_matter.code_language == "csharp"
    assert len(bundled.entries) == 12
    assert check_document(bundled) == []


def test_bundled_lookup(bundled):
    store = EntryStore.from_document(bundled)
    entry = store.find_by_title("nameof operator")
    assert "nameof(x)" in entry.new_code
    with pytest.raises(EntryNotFoundError):
        store.find_by_title("nonexistent")


def test_bundled_order(bundled):
    titles = [e.title for e in bundled.entries]
    assert titles.index("Auto-property initializers") < titles.index("Getter-only properties")


def test_bundled_entry_without_old_equivalent(bundled):
    store = EntryStore.from_document(bundled)
    entry = store.find_by_title("Improved overload resolution")
    assert entry.old_code == ""
    assert "no direct equivalent" in entry.notes.lower()


def test_bundled_round_trip(bundled):
    assert parse_document(render(bundled).text) == bundled


def test_read_missing_file(tmp_path):
    with pytest.raises(DocumentIOError) as exc_info:
        read_document(tmp_path / "nope.md")
    assert exc_info.value.path.endswith("nope.md")


def test_write_output_creates_parents(tmp_path):
    target = tmp_path / "a" / "b" / "out.md"
    assert write_output(target, "hello") == target
    assert target.read_text(encoding="utf-8") == "hello"
