"""File use cases: upload (write), download (read), and delete."""

from uploader.application.use_cases.files.file_operations import (
    FileDeletionService,
    FileDownloadService,
    FileUploadService,
)

__all__ = [
    "FileDeletionService",
    "FileDownloadService",
    "FileUploadService",
]
