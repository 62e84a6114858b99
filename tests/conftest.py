"""Root conftest — shared test configuration and sample content."""

import os

import pytest

from sidebyside.core.domain_types import Document, FrontMatter
from tests.factories import make_document, make_entry

# Keep test runs independent of a developer's .env
os.environ.setdefault("SIDEBYSIDE_LOG_FORMAT", "text")


@pytest.fixture
def sample_document() -> Document:
    """Three well-formed entries, one without an old equivalent."""
    return Document(
        front_matter=FrontMatter(
            title="C# 6 Comparison",
            attribution="Sample attribution",
            license="CC BY 4.0",
            code_language="csharp",
        ),
        entries=(
            make_entry("Auto-property initializers"),
            make_entry(
                "Getter-only properties",
                description="Properties without setters.",
                new_code="public string Name { get; }",
                old_code="private readonly string name;\npublic string Name { get { return name; } }",
            ),
            make_entry(
                "Improved overload resolution",
                description="Fewer ambiguity errors.",
                new_code="Task.Run(DoThings);",
                old_code="",
                notes="There is no direct equivalent.",
            ),
        ),
        preamble="Side-by-side samples.",
    )


@pytest.fixture
def malformed_document() -> Document:
    """Entry 1 lacks a title, entry 3 has no code at all."""
    return make_document(
        make_entry("First"),
        make_entry("", description="untitled"),
        make_entry("Third"),
        make_entry("Fourth", new_code="", old_code="", notes="nothing here"),
    )
