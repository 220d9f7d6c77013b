"""Repositories: return application DTOs, never ORM objects."""

from uploader.infrastructure.persistence.repositories.file_record_repo import (
    FileRecordRepository,
)

__all__ = ["FileRecordRepository"]
