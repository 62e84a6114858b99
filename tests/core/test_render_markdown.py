"""Markdown rendering tests — template shape, fences, and the render plan.

Tests cover:
    - Front matter, title, preamble, entry sections in template order
    - Empty samples render the no-equivalent marker
    - Fences grow past backtick runs inside samples
    - Multi-line notes are block-quoted line by line
    - plan_render drops malformed entries (lenient) or raises (strict)
"""

import pytest
import yaml

from sidebyside.core.errors import DuplicateTitleError, RenderFailedError
from sidebyside.core.render_markdown import (
    NO_EQUIVALENT_MARKER, code_fence, render_markdown,
)
from sidebyside.core.render_plan import plan_render
from tests.factories import make_document, make_entry


def _render(document):
    return render_markdown(document, plan_render(document).entries)


def test_front_matter_is_yaml(sample_document):
    text = _render(sample_document)
    assert text.startswith("---\n")
    block = text.split("---\n")[1]
    assert yaml.safe_load(block) == {
        "title": "C# 6 Comparison",
        "attribution": "Sample attribution",
        "license": "CC BY 4.0",
        "code_language": "csharp",
    }


def test_empty_front_matter_fields_omitted():
    text = _render(make_document(make_entry("a")))
    block = text.split("---\n")[1]
    assert yaml.safe_load(block) == {"title": "Feature Comparison"}


def test_document_title_and_preamble(sample_document):
    text = _render(sample_document)
    assert "\n# C# 6 Comparison\n\nSide-by-side samples.\n" in text


def test_entry_sections_follow_template_order(sample_document):
    text = _render(sample_document)
    block = text[text.index("## Auto-property initializers"):text.index("## Getter-only")]
    order = [
        block.index("## Auto-property initializers"),
        block.index("Initial values declared"),
        block.index("### New syntax"),
        block.index("public int X { get; set; } = 5;"),
        block.index("### Old syntax"),
        block.index("public C() { X = 5; }"),
    ]
    assert order == sorted(order)


def test_code_language_used_as_info_string(sample_document):
    assert "```csharp\npublic string Name { get; }\n```" in _render(sample_document)


def test_every_title_once_in_order(sample_document):
    text = _render(sample_document)
    positions = []
    for entry in sample_document.entries:
        assert text.count(entry.title) == 1
        positions.append(text.index(entry.title))
    assert positions == sorted(positions)
    assert text.index("Auto-property initializers") < text.index("Getter-only properties")


def test_empty_sample_renders_marker_and_note(sample_document):
    text = _render(sample_document)
    tail = text[text.index("## Improved overload resolution"):]
    assert f"### Old syntax\n\n{NO_EQUIVALENT_MARKER}" in tail
    assert "> **Note:** There is no direct equivalent." in tail


def test_multiline_note_quoted_per_line():
    doc = make_document(make_entry("a", notes="first\n\nthird"))
    assert "> **Note:** first\n>\n> third" in _render(doc)


def test_entry_without_description_has_no_blank_paragraph():
    doc = make_document(make_entry("a", description=""))
    assert "## a\n\n### New syntax" in _render(doc)


def test_code_fence_minimum_three():
    assert code_fence("x = 1") == "```"


def test_code_fence_longer_than_inner_backticks():
    assert code_fence("s = ```nested```") == "````"
    assert code_fence("a ````` b") == "``````"


def test_sample_with_fence_is_wrapped_in_longer_fence():
    doc = make_document(make_entry("a", new_code="```\ninner\n```"))
    assert "````\n```\ninner\n```\n````" in _render(doc)


def test_plan_keeps_order_and_reports_malformed(malformed_document):
    plan = plan_render(malformed_document)
    assert [e.title for e in plan.entries] == ["First", "Third"]
    assert [e.position for e in plan.errors] == [1, 3]


def test_plan_strict_raises_with_all_errors(malformed_document):
    with pytest.raises(RenderFailedError) as exc_info:
        plan_render(malformed_document, strict=True)
    assert [e.position for e in exc_info.value.errors] == [1, 3]


def test_plan_strict_passes_clean_document(sample_document):
    plan = plan_render(sample_document, strict=True)
    assert len(plan.entries) == 3
    assert plan.errors == ()


def test_plan_rejects_duplicate_titles():
    doc = make_document(make_entry("a"), make_entry("a"))
    with pytest.raises(DuplicateTitleError):
        plan_render(doc)
