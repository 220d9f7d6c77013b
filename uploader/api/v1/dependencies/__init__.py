"""FastAPI dependencies (composition root)."""

from uploader.api.v1.dependencies.files import (
    get_file_deletion_service,
    get_file_download_service,
    get_file_record_repo,
    get_file_upload_service,
    get_upload_options,
)

__all__ = [
    "get_file_deletion_service",
    "get_file_download_service",
    "get_file_record_repo",
    "get_file_upload_service",
    "get_upload_options",
]
