"""Storage backend protocol (DIP). Implementations: FilesystemStorageBackend, RecordStorageBackend."""

from typing import Protocol

from uploader.application.dtos.file import FileRecord, StoredPayload
from uploader.application.interfaces.sources import IUploadSource
from uploader.domain.enums import StorageType


class IStorageBackend(Protocol):
    """Capability shared by the two storage variants, selected by StorageType."""

    storage_type: StorageType

    async def store(
        self,
        source: IUploadSource,
        destination_dir: str,
        file_name: str,
    ) -> StoredPayload:
        """Consume source and persist its bytes.

        Raises StorageUploadError on failure, including when the bytes copied
        differ from source.length; nothing is left under the final name then.
        """
        ...

    async def fetch(self, record: FileRecord) -> bytes:
        """Return the stored bytes. Raises StorageNotFoundError when they are gone."""
        ...

    async def remove(self, record: FileRecord) -> None:
        """Delete the stored bytes; a missing payload is not an error."""
        ...
