"""File record repository. Returns application FileRecord DTOs."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from uploader.application.dtos.file import FileRecord
from uploader.infrastructure.exceptions import PersistenceError
from uploader.infrastructure.persistence.models.file_record import StoredFile
from uploader.shared.utils import ensure_utc


def _record_to_model(r: FileRecord) -> StoredFile:
    """Map FileRecord to ORM StoredFile for persistence."""
    return StoredFile(
        id=r.id,
        file_name=r.file_name,
        content_type=r.content_type,
        file_size=r.file_size,
        file_data=r.inline_data,
        file_path=r.storage_path,
        upload_date=r.uploaded_at,
        last_modified=r.last_modified,
    )


def _model_to_record(m: StoredFile) -> FileRecord:
    """Map ORM StoredFile to application FileRecord."""
    return FileRecord(
        id=m.id,
        file_name=m.file_name,
        content_type=m.content_type,
        file_size=m.file_size,
        inline_data=m.file_data,
        storage_path=m.file_path,
        uploaded_at=ensure_utc(m.upload_date),
        last_modified=ensure_utc(m.last_modified),
    )


class FileRecordRepository:
    """SQLAlchemy implementation of IFileRecordRepository.

    add/remove stage changes on the session; commit is the durability
    boundary. Database faults surface as PersistenceError so callers can
    tell them apart from a missing record (get returns None).
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def get(self, file_id: str) -> FileRecord | None:
        try:
            row = await self.db.get(StoredFile, file_id)
        except SQLAlchemyError as e:
            raise PersistenceError("get", str(e)) from e
        return _model_to_record(row) if row else None

    async def add(self, record: FileRecord) -> None:
        self.db.add(_record_to_model(record))

    async def remove(self, record: FileRecord) -> None:
        try:
            row = await self.db.get(StoredFile, record.id)
            if row is not None:
                await self.db.delete(row)
        except SQLAlchemyError as e:
            raise PersistenceError("remove", str(e)) from e

    async def commit(self) -> None:
        try:
            await self.db.commit()
        except SQLAlchemyError as e:
            raise PersistenceError("commit", str(e)) from e

    async def rollback(self) -> None:
        await self.db.rollback()
