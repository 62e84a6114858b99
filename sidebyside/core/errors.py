"""Error Hierarchy — typed, categorized exceptions for all SideBySide failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Content errors (4xx) describe the document; IO errors (5xx) describe the shell
    - to_response() produces the REST envelope used by the API error handlers
    - MalformedEntryError always carries the offending entry's position

Design Decisions:
    - Single hierarchy with SideBySideError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from sidebyside.core.domain_types import EntryProblem


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    STORAGE = "storage"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entry_title: str | None = None
    position: int | None = None
    source_path: str | None = None
    debug_info: dict[str, Any] | None = None


class SideBySideError(Exception):
    """Base exception for all SideBySide errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "entry_title": self.context.entry_title,
                    "position": self.context.position,
                    "source_path": self.context.source_path,
                },
            }
        }


# ─── Content Errors (400-level) ─────────────────────────────────

_PROBLEM_MESSAGES: dict[EntryProblem, str] = {
    EntryProblem.MISSING_TITLE: "entry has no title",
    EntryProblem.INVALID_TITLE: (
        "entry title spans several lines or has surrounding whitespace"
    ),
    EntryProblem.MISSING_CODE_SAMPLES: "entry has neither a new nor an old code sample",
    EntryProblem.UNDOCUMENTED_EMPTY_SAMPLE: (
        "entry has an empty code sample without a note explaining "
        "that there is no direct equivalent"
    ),
}


class MalformedEntryError(SideBySideError):
    """Topic entry is missing a required field."""
    def __init__(
        self,
        position: int,
        problem: EntryProblem,
        title: str = "",
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.position = position
        ctx.entry_title = title or None
        label = f" '{title}'" if title.strip() else ""
        super().__init__(
            f"Malformed entry{label} at position {position}: {_PROBLEM_MESSAGES[problem]}",
            "MALFORMED_ENTRY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.position = position
        self.problem = problem
        self.title = title


class DuplicateTitleError(SideBySideError):
    """Two or more entries share a title."""
    def __init__(
        self, title: str, positions: list[int], context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.entry_title = title
        super().__init__(
            f"Title '{title}' is used by more than one entry "
            f"(positions {', '.join(str(p) for p in positions)})",
            "DUPLICATE_TITLE", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 422,
        )
        self.title = title
        self.positions = positions


class EntryNotFoundError(SideBySideError):
    """No entry has exactly this title."""
    def __init__(self, title: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.entry_title = title
        super().__init__(
            f"Entry '{title}' not found",
            "ENTRY_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.title = title


class EntryPositionError(SideBySideError):
    """Positional lookup outside the store."""
    def __init__(self, position: int, size: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.position = position
        super().__init__(
            f"No entry at position {position} (document has {size} entries)",
            "ENTRY_POSITION_OUT_OF_RANGE", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.position = position
        self.size = size


class DocumentParseError(SideBySideError):
    """Markup could not be read as a feature-comparison document."""
    def __init__(
        self, message: str, line: int | None = None, context: ErrorContext | None = None,
    ):
        where = f" (line {line})" if line is not None else ""
        super().__init__(
            f"Cannot parse document{where}: {message}",
            "DOCUMENT_PARSE_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.line = line


class RenderFailedError(SideBySideError):
    """Strict render refused a document containing malformed entries."""
    def __init__(
        self, errors: list[MalformedEntryError], context: ErrorContext | None = None,
    ):
        positions = ", ".join(str(e.position) for e in errors)
        super().__init__(
            f"Render failed: {len(errors)} malformed entry(ies) at position(s) {positions}",
            "RENDER_FAILED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 422,
        )
        self.errors = errors

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = [
            {"position": e.position, "problem": e.problem.value, "title": e.title}
            for e in self.errors
        ]
        return response


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DocumentIOError(SideBySideError):
    """Reading the source or writing the output failed."""
    def __init__(
        self, message: str, path: str, operation: str, context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.source_path = path
        super().__init__(
            f"Document {operation} failed for {path}: {message}",
            "DOCUMENT_IO_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.path = path
        self.operation = operation


class DocumentNotLoadedError(SideBySideError):
    """API used before the document source was initialized."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Document source not initialized",
            "DOCUMENT_NOT_LOADED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )
