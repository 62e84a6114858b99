"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Every setting overridable with a SIDEBYSIDE_-prefixed environment variable
    - get_settings() is cached (lru_cache): single instance per process
    - source_path defaults to the bundled sample document

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - No CLI flags: builds are configured the same way as the API
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from sidebyside.core.domain_types import OutputFormat
from sidebyside.infrastructure.document_files import bundled_document_path


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SIDEBYSIDE_", env_file=".env", case_sensitive=False,
    )

    # Content
    source_path: str = str(bundled_document_path())
    output_path: str = "build/features.html"
    output_format: OutputFormat = OutputFormat.HTML
    strict: bool = False

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_output_format(cls, v):
        """Accept HTML / Markdown / md in any case."""
        if isinstance(v, str):
            v = v.strip().lower()
            if v == "md":
                return OutputFormat.MARKDOWN.value
        return v

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
