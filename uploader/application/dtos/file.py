"""DTOs for file use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from datetime import datetime

from uploader.core.constants import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_STORAGE_PATH,
)
from uploader.domain.enums import StorageType


@dataclass(frozen=True)
class FileRecord:
    """Metadata row for one stored file.

    Exactly one of inline_data / storage_path is set once the record is
    stored: inline_data for the database backend, storage_path for the
    filesystem backend.
    """

    id: str
    file_name: str
    content_type: str
    file_size: int
    uploaded_at: datetime
    inline_data: bytes | None = None
    storage_path: str | None = None
    last_modified: datetime | None = None

    @property
    def storage_type(self) -> StorageType | None:
        """Backend that holds the bytes, or None when neither field is set."""
        if self.inline_data is not None:
            return StorageType.DATABASE
        if self.storage_path:
            return StorageType.FILESYSTEM
        return None


@dataclass(frozen=True)
class FileValidationRules:
    """Declarative constraints checked by FileValidator.

    An empty allowed_extensions means any extension is accepted.
    """

    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    allowed_extensions: tuple[str, ...] = DEFAULT_ALLOWED_EXTENSIONS
    allow_multiple: bool = False


@dataclass(frozen=True)
class UploadOptions:
    """Caller-supplied upload configuration (not persisted)."""

    storage_path: str = DEFAULT_STORAGE_PATH
    storage_type: StorageType = StorageType.FILESYSTEM
    max_file_size: int = DEFAULT_MAX_FILE_SIZE
    allowed_extensions: tuple[str, ...] = ()
    generate_unique_file_name: bool = True
    allow_multiple: bool = True

    @property
    def validation_rules(self) -> FileValidationRules:
        return FileValidationRules(
            max_file_size=self.max_file_size,
            allowed_extensions=tuple(self.allowed_extensions),
            allow_multiple=self.allow_multiple,
        )


@dataclass(frozen=True)
class StoredPayload:
    """What a storage backend produced for one payload; becomes part of the record."""

    size: int
    storage_path: str | None = None
    inline_data: bytes | None = None


@dataclass(frozen=True)
class UploadResult:
    """Outcome of one upload. success=False always carries error_message.

    error_code is VALIDATION_ERROR for rejected input and UPLOAD_ERROR for
    storage or persistence faults.
    """

    success: bool
    file_id: str | None = None
    file_name: str | None = None
    file_path: str | None = None
    file_size: int | None = None
    content_type: str | None = None
    uploaded_at: datetime | None = None
    error_message: str = ""
    error_code: str | None = None

    @classmethod
    def failure(cls, message: str, error_code: str = "VALIDATION_ERROR") -> "UploadResult":
        return cls(success=False, error_message=message, error_code=error_code)


@dataclass(frozen=True)
class DownloadResult:
    """Outcome of one download.

    error_code tells "no such record" (RESOURCE_NOT_FOUND) apart from
    "record without retrievable bytes" (DATA_INCONSISTENT).
    """

    success: bool
    file_data: bytes | None = field(default=None, repr=False)
    file_name: str | None = None
    content_type: str | None = None
    error_message: str = ""
    error_code: str | None = None

    @classmethod
    def failure(cls, message: str, error_code: str) -> "DownloadResult":
        return cls(success=False, error_message=message, error_code=error_code)
