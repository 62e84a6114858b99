"""Build entry point: `python -m sidebyside`, configured by SIDEBYSIDE_* settings."""

import logging
import sys

from sidebyside.config import get_settings
from sidebyside.core.errors import SideBySideError
from sidebyside.infrastructure.observability import error_extra, setup_logging
from sidebyside.services.build_document import build_document

logger = logging.getLogger("sidebyside")


def main() -> int:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    try:
        build_document(
            settings.source_path,
            settings.output_path,
            settings.output_format,
            strict=settings.strict,
        )
    except SideBySideError as e:
        logger.error(f"Build failed: {e.message}", extra=error_extra(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
