"""Shared utilities: datetime, identifiers, filename handling, telemetry.

Used by domain, application, and infrastructure. No business logic.
"""

from uploader.shared.utils import generate_file_id, sanitize_filename, utc_now

__all__ = [
    "generate_file_id",
    "sanitize_filename",
    "utc_now",
]
