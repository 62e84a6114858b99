"""Domain Types — immutable values for the feature-comparison document.

Invariants:
    - TopicEntry, FrontMatter, Document are frozen, never mutated after assembly
    - Document.entries is a tuple; order is reading order only
    - Code samples are opaque text (never parsed, never executed)
    - All valid states encoded as Enums, no raw string matching

Design Decisions:
    - Frozen dataclasses over Pydantic models in core: core stays dependency-free,
      API schemas live in schemas/ (ADR: core never imports shell)
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass, field
from enum import Enum


class OutputFormat(str, Enum):
    """Rendering targets."""
    MARKDOWN = "markdown"
    HTML = "html"


class EntryProblem(str, Enum):
    """Why a topic entry cannot be rendered."""
    MISSING_TITLE = "missing_title"
    MISSING_CODE_SAMPLES = "missing_code_samples"
    UNDOCUMENTED_EMPTY_SAMPLE = "undocumented_empty_sample"
    INVALID_TITLE = "invalid_title"


@dataclass(frozen=True)
class TopicEntry:
    """One language-feature comparison."""
    title: str
    description: str = ""
    new_code: str = ""
    old_code: str = ""
    notes: str = ""

    @property
    def has_new_code(self) -> bool:
        return bool(self.new_code.strip())

    @property
    def has_old_code(self) -> bool:
        return bool(self.old_code.strip())

    @property
    def has_notes(self) -> bool:
        return bool(self.notes.strip())


@dataclass(frozen=True)
class FrontMatter:
    title: str
    attribution: str = ""
    license: str = ""
    code_language: str = ""


@dataclass(frozen=True)
class Document:
    """Front matter plus the ordered topic entries."""
    front_matter: FrontMatter
    entries: tuple[TopicEntry, ...] = field(default_factory=tuple)
    preamble: str = ""

    @property
    def title(self) -> str:
        return self.front_matter.title
