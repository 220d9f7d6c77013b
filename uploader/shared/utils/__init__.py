"""Shared utilities: datetime, generators, filename sanitization."""

from uploader.shared.utils.datetime import ensure_utc, utc_now
from uploader.shared.utils.generators import generate_file_id
from uploader.shared.utils.sanitization import sanitize_filename

__all__ = [
    "ensure_utc",
    "generate_file_id",
    "sanitize_filename",
    "utc_now",
]
