"""Local filesystem storage with path validation and atomic writes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import aiofiles
import aiofiles.os

from uploader.application.dtos.file import FileRecord, StoredPayload
from uploader.application.interfaces.sources import IUploadSource
from uploader.domain.enums import StorageType
from uploader.infrastructure.exceptions import (
    StorageDeleteError,
    StorageDownloadError,
    StorageNotFoundError,
    StoragePermissionError,
    StorageUploadError,
)


def _check_length(source: IUploadSource, written: int, file_path: str) -> None:
    """Raise StorageUploadError when the source delivered fewer or more bytes than declared."""
    if written != source.length:
        raise StorageUploadError(
            file_path, f"declared {source.length} bytes, wrote {written}"
        )


class FilesystemStorageBackend:
    """Filesystem backend: one file per upload under the destination directory.

    Writes go to a temp file in the destination directory and are renamed
    onto the final name only once the source is fully consumed, so a
    partial file is never visible under the final name. An existing file
    at the same path is replaced. The filesystem is the source of truth
    for fetch, independent of the record.
    """

    storage_type = StorageType.FILESYSTEM

    def __init__(self, file_mode: int = 0o640) -> None:
        self.file_mode = file_mode

    @staticmethod
    def _get_full_path(destination_dir: Path, file_name: str) -> Path:
        """Resolve file_name under destination_dir. Raises StoragePermissionError on traversal."""
        full_path = (destination_dir / file_name).resolve()
        try:
            full_path.relative_to(destination_dir)
        except ValueError as e:
            raise StoragePermissionError(file_name, "path_validation") from e
        return full_path

    async def store(
        self,
        source: IUploadSource,
        destination_dir: str,
        file_name: str,
    ) -> StoredPayload:
        """Write source to destination_dir/file_name and return the resolved path."""
        target_dir = Path(destination_dir).resolve()
        target_path = self._get_full_path(target_dir, file_name)
        try:
            target_dir.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                dir=target_dir,
                prefix=".tmp_",
                suffix=target_path.suffix,
            )
            os.close(temp_fd)
            try:
                async with aiofiles.open(temp_path, "wb") as f:
                    written = await source.copy_to(f)
                _check_length(source, written, str(target_path))
                os.chmod(temp_path, self.file_mode)
                os.replace(temp_path, target_path)
            finally:
                if Path(temp_path).exists():
                    os.unlink(temp_path)
        except StorageUploadError:
            raise
        except Exception as e:
            raise StorageUploadError(str(target_path), str(e)) from e
        return StoredPayload(size=written, storage_path=str(target_path))

    async def fetch(self, record: FileRecord) -> bytes:
        """Read the whole file. Raises StorageNotFoundError if the path is gone."""
        path = record.storage_path
        if not path or not Path(path).is_file():
            raise StorageNotFoundError(path or record.id)
        try:
            async with aiofiles.open(path, "rb") as f:
                return await f.read()
        except FileNotFoundError as e:
            raise StorageNotFoundError(path) from e
        except Exception as e:
            raise StorageDownloadError(path, str(e)) from e

    async def remove(self, record: FileRecord) -> None:
        """Delete the file; no-op when the path is missing."""
        path = record.storage_path
        if not path:
            return
        try:
            await aiofiles.os.remove(path)
        except FileNotFoundError:
            return
        except Exception as e:
            raise StorageDeleteError(path, str(e)) from e
