"""Repository protocols (DIP). Implementation: FileRecordRepository (SQLAlchemy)."""

from typing import Protocol

from uploader.application.dtos.file import FileRecord


class IFileRecordRepository(Protocol):
    """Protocol for the durable store of file records.

    add/remove stage changes; commit is the durability boundary and raises
    PersistenceError on failure (never returns "not found").
    """

    async def get(self, file_id: str) -> FileRecord | None:
        """Return the record for file_id, or None."""
        ...

    async def add(self, record: FileRecord) -> None:
        """Stage a new record."""
        ...

    async def remove(self, record: FileRecord) -> None:
        """Stage deletion of a record."""
        ...

    async def commit(self) -> None:
        """Persist staged changes."""
        ...

    async def rollback(self) -> None:
        """Discard staged changes after a failed commit."""
        ...
