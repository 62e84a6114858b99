"""Entry validation tests — pure tests for check_entry and friends.

Tests cover:
    - Well-formed entries pass
    - Missing title and missing code samples are reported with position
    - One empty sample needs a note documenting the missing equivalent
    - Notes cannot rescue an entry with no code at all
    - Titles with surrounding whitespace or line breaks are invalid
    - Duplicate titles are exact and case-sensitive; blank titles never clash
"""

import pytest

from sidebyside.core.domain_types import EntryProblem
from sidebyside.core.validate_entry import (
    check_document, check_entry, find_duplicate_titles,
)
from tests.factories import make_document, make_entry


def test_complete_entry_passes():
    assert check_entry(make_entry(), 0) is None


def test_blank_title_is_malformed():
    err = check_entry(make_entry("   "), 3)
    assert err is not None
    assert err.problem is EntryProblem.MISSING_TITLE
    assert err.position == 3


@pytest.mark.parametrize("title", ["Alpha ", " Alpha", "Alpha\nBeta", "Alpha\r\n"])
def test_title_with_whitespace_or_newline_is_malformed(title):
    err = check_entry(make_entry(title), 2)
    assert err is not None
    assert err.problem is EntryProblem.INVALID_TITLE
    assert err.position == 2


def test_both_samples_empty_is_malformed():
    err = check_entry(make_entry("Using static", new_code="", old_code=" "), 1)
    assert err.problem is EntryProblem.MISSING_CODE_SAMPLES
    assert err.title == "Using static"


def test_notes_do_not_replace_both_samples():
    entry = make_entry("Using static", new_code="", old_code="", notes="n/a")
    assert check_entry(entry, 0).problem is EntryProblem.MISSING_CODE_SAMPLES


def test_empty_old_sample_with_note_is_accepted():
    entry = make_entry(
        "Improved overload resolution",
        old_code="",
        notes="there is no direct equivalent",
    )
    assert check_entry(entry, 0) is None


def test_empty_new_sample_with_note_is_accepted():
    entry = make_entry("Removed feature", new_code="", notes="no new form")
    assert check_entry(entry, 0) is None


def test_empty_sample_without_note_is_malformed():
    err = check_entry(make_entry("Improved overload resolution", old_code=""), 2)
    assert err.problem is EntryProblem.UNDOCUMENTED_EMPTY_SAMPLE


def test_check_document_reports_in_order(malformed_document):
    errors = check_document(malformed_document)
    assert [e.position for e in errors] == [1, 3]
    assert [e.problem for e in errors] == [
        EntryProblem.MISSING_TITLE, EntryProblem.MISSING_CODE_SAMPLES,
    ]


def test_check_document_empty_for_valid(sample_document):
    assert check_document(sample_document) == []


def test_find_duplicate_titles_exact_match():
    doc = make_document(
        make_entry("nameof operator"),
        make_entry("Nameof operator"),
        make_entry("nameof operator"),
    )
    assert find_duplicate_titles(doc.entries) == {"nameof operator": [0, 2]}


def test_find_duplicate_titles_none():
    assert find_duplicate_titles([make_entry("a"), make_entry("b")]) == {}


def test_find_duplicate_titles_ignores_blank_titles():
    entries = [make_entry("Good"), make_entry(""), make_entry("  "), make_entry("")]
    assert find_duplicate_titles(entries) == {}
