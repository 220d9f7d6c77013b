"""Inline storage: the payload lives in the file record's inline_data."""

from __future__ import annotations

from uploader.application.dtos.file import FileRecord, StoredPayload
from uploader.application.interfaces.sources import IUploadSource
from uploader.domain.enums import StorageType
from uploader.infrastructure.exceptions import StorageNotFoundError, StorageUploadError


class _BufferSink:
    def __init__(self) -> None:
        self._buffer = bytearray()

    async def write(self, data: bytes) -> int:
        self._buffer.extend(data)
        return len(data)

    def getvalue(self) -> bytes:
        return bytes(self._buffer)


class RecordStorageBackend:
    """Database backend: no filesystem interaction.

    store buffers the source and hands the bytes back as inline_data; the
    record repository persists them with the rest of the record. Removing
    the record removes the bytes, so remove has nothing to do.
    """

    storage_type = StorageType.DATABASE

    async def store(
        self,
        source: IUploadSource,
        destination_dir: str,
        file_name: str,
    ) -> StoredPayload:
        sink = _BufferSink()
        written = await source.copy_to(sink)
        if written != source.length:
            raise StorageUploadError(
                f"record:{file_name}", f"declared {source.length} bytes, wrote {written}"
            )
        return StoredPayload(size=written, inline_data=sink.getvalue())

    async def fetch(self, record: FileRecord) -> bytes:
        if record.inline_data is None:
            raise StorageNotFoundError(f"record:{record.id}")
        return record.inline_data

    async def remove(self, record: FileRecord) -> None:
        return None
