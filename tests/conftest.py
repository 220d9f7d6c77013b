"""Pytest configuration and fixtures for the uploader.

Unit tests run the file services against an in-memory record repository
and real storage backends rooted in tmp_path. HTTP tests build the app
with create_app() against a throwaway SQLite database.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

from uploader.application.dtos.file import FileRecord, UploadOptions
from uploader.application.use_cases.files import (
    FileDeletionService,
    FileDownloadService,
    FileUploadService,
)
from uploader.core.config import get_settings
from uploader.domain.enums import StorageType
from uploader.infrastructure.external.storage import StorageFactory
from uploader.infrastructure.persistence.database import create_schema, dispose_engine


class InMemoryFileRecordRepository:
    """IFileRecordRepository over a dict. add/remove are staged until commit."""

    def __init__(self) -> None:
        self.records: dict[str, FileRecord] = {}
        self._pending_add: dict[str, FileRecord] = {}
        self._pending_remove: set[str] = set()
        self.commits = 0
        self.rollbacks = 0

    async def get(self, file_id: str) -> FileRecord | None:
        return self.records.get(file_id)

    async def add(self, record: FileRecord) -> None:
        self._pending_add[record.id] = record

    async def remove(self, record: FileRecord) -> None:
        self._pending_remove.add(record.id)

    async def commit(self) -> None:
        self.records.update(self._pending_add)
        for file_id in self._pending_remove:
            self.records.pop(file_id, None)
        self._pending_add.clear()
        self._pending_remove.clear()
        self.commits += 1

    async def rollback(self) -> None:
        self._pending_add.clear()
        self._pending_remove.clear()
        self.rollbacks += 1


@pytest.fixture
def record_repo() -> InMemoryFileRecordRepository:
    return InMemoryFileRecordRepository()


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Destination root for filesystem uploads (not created up front)."""
    return tmp_path / "uploads"


@pytest.fixture
def make_options(storage_dir: Path):
    """Build UploadOptions rooted in storage_dir; keyword overrides win."""

    def _make(**overrides) -> UploadOptions:
        values = {
            "storage_path": str(storage_dir),
            "storage_type": StorageType.FILESYSTEM,
            "max_file_size": 5 * 1024 * 1024,
            "allowed_extensions": (".png", ".jpg"),
            "generate_unique_file_name": True,
            "allow_multiple": True,
        }
        values.update(overrides)
        return UploadOptions(**values)

    return _make


@pytest.fixture
def backends():
    return StorageFactory.create_storage_backends()


@pytest.fixture
def upload_service(record_repo, backends) -> FileUploadService:
    return FileUploadService(record_repo, backends)


@pytest.fixture
def download_service(record_repo, backends) -> FileDownloadService:
    return FileDownloadService(record_repo, backends)


@pytest.fixture
def deletion_service(record_repo, backends) -> FileDeletionService:
    return FileDeletionService(record_repo, backends)


@pytest.fixture
async def client(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against a fresh app, SQLite database, and storage root.

    ASGITransport does not run the lifespan, so the schema is created here.
    """
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'uploader.db'}")
    monkeypatch.setenv("STORAGE_ROOT", str(tmp_path / "uploads"))
    monkeypatch.setenv("STORAGE_BACKEND", "filesystem")
    monkeypatch.setenv("MAX_UPLOAD_SIZE", str(1024 * 1024))
    monkeypatch.setenv("ALLOWED_EXTENSIONS", ".png,.jpg,.txt")
    monkeypatch.setenv("ALLOW_MULTIPLE", "true")
    get_settings.cache_clear()
    await dispose_engine()
    await create_schema()

    from uploader.main import create_app

    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    await dispose_engine()
    get_settings.cache_clear()
