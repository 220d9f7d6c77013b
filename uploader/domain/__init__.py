"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from uploader.domain.enums import StorageType
from uploader.domain.exceptions import (
    DataInconsistentException,
    ResourceNotFoundException,
    UploaderException,
    ValidationException,
)

__all__ = [
    # Enums
    "StorageType",
    # Exceptions
    "DataInconsistentException",
    "ResourceNotFoundException",
    "UploaderException",
    "ValidationException",
]
