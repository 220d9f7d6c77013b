"""Logging configuration for the uploader.

File services log with extra={"file_id" or "file_name", "operation"}; the
handler installed here renders those keys on every line so the output can
be grepped by identifier.
"""

import logging
import sys

from uploader.core.config import get_settings

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(operation)s %(file_ref)s] %(message)s"
)


class FileContextFilter(logging.Filter):
    """Fill operation/file_ref so LOG_FORMAT works for records without extra."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "operation"):
            record.operation = "-"
        ref = getattr(record, "file_id", None) or getattr(record, "file_name", None)
        record.file_ref = ref or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(FileContextFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        handlers=[handler],
    )
