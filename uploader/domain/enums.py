"""Domain enumerations for the uploader.

Enums represent fixed sets of domain values (e.g. storage backend).
"""

from enum import Enum


class StorageType(str, Enum):
    """Where the bytes of an uploaded file live.

    FILESYSTEM writes the payload to disk and records its path.
    DATABASE keeps the payload inline on the file record.
    """

    FILESYSTEM = "filesystem"
    DATABASE = "database"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid storage type values as strings."""
        return [storage_type.value for storage_type in cls]
