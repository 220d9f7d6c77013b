"""Application DTOs (no dependency on ORM or web framework)."""

from uploader.application.dtos.file import (
    DownloadResult,
    FileRecord,
    FileValidationRules,
    StoredPayload,
    UploadOptions,
    UploadResult,
)

__all__ = [
    "DownloadResult",
    "FileRecord",
    "FileValidationRules",
    "StoredPayload",
    "UploadOptions",
    "UploadResult",
]
