"""File service dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from uploader.application.dtos.file import UploadOptions
from uploader.application.use_cases.files import (
    FileDeletionService,
    FileDownloadService,
    FileUploadService,
)
from uploader.core.config import get_settings
from uploader.infrastructure.external.storage import StorageFactory
from uploader.infrastructure.persistence.database import get_db
from uploader.infrastructure.persistence.repositories import FileRecordRepository


def get_upload_options() -> UploadOptions:
    """UploadOptions built from settings."""
    return get_settings().upload_options()


async def get_file_record_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> FileRecordRepository:
    return FileRecordRepository(db)


async def get_file_upload_service(
    repo: Annotated[FileRecordRepository, Depends(get_file_record_repo)],
) -> FileUploadService:
    return FileUploadService(repo, StorageFactory.create_storage_backends())


async def get_file_download_service(
    repo: Annotated[FileRecordRepository, Depends(get_file_record_repo)],
) -> FileDownloadService:
    return FileDownloadService(repo, StorageFactory.create_storage_backends())


async def get_file_deletion_service(
    repo: Annotated[FileRecordRepository, Depends(get_file_record_repo)],
) -> FileDeletionService:
    return FileDeletionService(repo, StorageFactory.create_storage_backends())
