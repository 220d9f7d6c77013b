"""Storage backend factory: one backend per StorageType."""

from __future__ import annotations

from uploader.application.interfaces.storage import IStorageBackend
from uploader.domain.enums import StorageType


class StorageFactory:
    """Factory for storage backend instances."""

    @staticmethod
    def create_storage_backend(storage_type: StorageType | str) -> IStorageBackend:
        """Create the backend for storage_type.

        Raises:
            ValueError: Unknown storage type.
        """
        try:
            kind = StorageType(storage_type)
        except ValueError as e:
            raise ValueError(
                f"Unknown storage backend: {storage_type}. "
                f"Supported: {', '.join(StorageType.values())}"
            ) from e

        if kind is StorageType.FILESYSTEM:
            from uploader.infrastructure.external.storage.local_storage import (
                FilesystemStorageBackend,
            )

            return FilesystemStorageBackend()

        from uploader.infrastructure.external.storage.record_storage import (
            RecordStorageBackend,
        )

        return RecordStorageBackend()

    @classmethod
    def create_storage_backends(cls) -> dict[StorageType, IStorageBackend]:
        """Create one backend for every StorageType (upload selects, download/delete dispatch by record)."""
        return {kind: cls.create_storage_backend(kind) for kind in StorageType}
