"""Storage: filesystem and inline-record backends.

StorageFactory builds a backend per StorageType. Both implement
IStorageBackend (store, fetch, remove). The filesystem backend requires
aiofiles; the record backend has no external resource beyond the record
repository.
"""

from uploader.infrastructure.external.storage.factory import StorageFactory
from uploader.infrastructure.external.storage.local_storage import (
    FilesystemStorageBackend,
)
from uploader.infrastructure.external.storage.record_storage import (
    RecordStorageBackend,
)

__all__ = [
    "FilesystemStorageBackend",
    "RecordStorageBackend",
    "StorageFactory",
]
