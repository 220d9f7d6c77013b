"""File operations: upload (write), download (read), and delete, each with a single responsibility.

Every public operation returns a result and never raises: validation and
not-found are expected outcomes, and unexpected storage or repository
faults are logged here and turned into generic messages.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from uploader.application.dtos.file import (
    DownloadResult,
    FileRecord,
    UploadOptions,
    UploadResult,
)
from uploader.application.interfaces.repositories import IFileRecordRepository
from uploader.application.interfaces.sources import IUploadSource
from uploader.application.interfaces.storage import IStorageBackend
from uploader.application.services.file_validator import FileValidator
from uploader.core.constants import (
    MSG_DOWNLOAD_FAILED,
    MSG_FILE_DATA_NOT_FOUND,
    MSG_FILE_NOT_FOUND,
    MSG_INVALID_FILE_NAME,
    MSG_NO_FILE_SELECTED,
    MSG_UPLOAD_FAILED,
)
from uploader.domain.enums import StorageType
from uploader.domain.exceptions import (
    DataInconsistentException,
    ResourceNotFoundException,
    ValidationException,
)
from uploader.infrastructure.exceptions import StorageNotFoundError
from uploader.shared.utils import generate_file_id, sanitize_filename, utc_now

logger = logging.getLogger(__name__)

UPLOAD_ERROR = "UPLOAD_ERROR"
DOWNLOAD_ERROR = "DOWNLOAD_ERROR"


class _FileService:
    """Shared wiring: record repository plus one backend per StorageType."""

    def __init__(
        self,
        record_repo: IFileRecordRepository,
        backends: Mapping[StorageType, IStorageBackend],
    ) -> None:
        self.record_repo = record_repo
        self.backends = dict(backends)

    def _backend_for(self, storage_type: StorageType) -> IStorageBackend:
        try:
            return self.backends[storage_type]
        except KeyError:
            raise ValueError(f"No storage backend configured for {storage_type.value}") from None

    async def _rollback(self, file_id: str, operation: str) -> None:
        try:
            await self.record_repo.rollback()
        except Exception:
            logger.warning(
                "Rollback failed after %s error: %s",
                operation,
                file_id,
                exc_info=True,
                extra={"file_id": file_id, "operation": operation},
            )


class FileUploadService(_FileService):
    """Single responsibility: validate, store bytes, and commit the file record."""

    def __init__(
        self,
        record_repo: IFileRecordRepository,
        backends: Mapping[StorageType, IStorageBackend],
        validator: FileValidator | None = None,
    ) -> None:
        super().__init__(record_repo, backends)
        self.validator = validator or FileValidator()

    async def upload(
        self, file: IUploadSource | None, options: UploadOptions
    ) -> UploadResult:
        """Upload one file. Either both bytes and record exist afterwards, or neither."""
        if file is None:
            return UploadResult.failure(MSG_NO_FILE_SELECTED)
        try:
            return await self._upload(file, options)
        except ValidationException as e:
            return UploadResult.failure(e.message, e.error_code)
        except Exception:
            logger.exception(
                "Error uploading file: %s",
                file.file_name,
                extra={"file_name": file.file_name, "operation": "upload"},
            )
            return UploadResult.failure(MSG_UPLOAD_FAILED, UPLOAD_ERROR)

    async def upload_batch(
        self, files: Iterable[IUploadSource | None] | None, options: UploadOptions
    ) -> list[UploadResult]:
        """Upload files in order; one result per input.

        When the batch breaks the multiplicity rule, nothing is stored and
        every input gets the same batch-level failure. Otherwise a failure on
        one file does not stop the rest.
        """
        batch = list(files or [])
        outcome = self.validator.validate_multiplicity(batch, options.validation_rules)
        if not outcome:
            logger.info(
                "Rejected batch of %d files: %s",
                len(batch),
                outcome.error_message,
                extra={"operation": "upload_batch"},
            )
            return [UploadResult.failure(outcome.error_message) for _ in batch]
        return [await self.upload(file, options) for file in batch]

    def _stored_file_name(self, file_id: str, original_name: str, options: UploadOptions) -> str:
        if options.generate_unique_file_name:
            return f"{file_id}_{original_name}"
        return original_name

    async def _upload(self, file: IUploadSource, options: UploadOptions) -> UploadResult:
        outcome = self.validator.validate(file, options.validation_rules)
        if not outcome:
            raise ValidationException(outcome.error_message, field=outcome.rule)
        try:
            original_name = sanitize_filename(file.file_name)
        except ValueError as e:
            raise ValidationException(MSG_INVALID_FILE_NAME, field="file_name") from e

        file_id = generate_file_id()
        file_name = self._stored_file_name(file_id, original_name, options)
        backend = self._backend_for(options.storage_type)

        payload = await backend.store(file, options.storage_path, file_name)
        record = FileRecord(
            id=file_id,
            file_name=file_name,
            content_type=file.content_type,
            file_size=payload.size,
            uploaded_at=utc_now(),
            inline_data=payload.inline_data,
            storage_path=payload.storage_path,
        )
        try:
            await self.record_repo.add(record)
            await self.record_repo.commit()
        except Exception:
            await self._rollback(file_id, "upload")
            await self._discard(backend, record)
            raise

        logger.info(
            "Stored file %s (%d bytes, %s)",
            file_id,
            record.file_size,
            options.storage_type.value,
            extra={"file_id": file_id, "operation": "upload"},
        )
        return UploadResult(
            success=True,
            file_id=file_id,
            file_name=file_name,
            file_path=record.storage_path,
            file_size=record.file_size,
            content_type=record.content_type,
            uploaded_at=record.uploaded_at,
        )

    async def _discard(self, backend: IStorageBackend, record: FileRecord) -> None:
        """Compensate a failed commit by removing bytes already written."""
        try:
            await backend.remove(record)
        except Exception:
            logger.error(
                "Orphaned file left after failed upload: %s",
                record.storage_path,
                exc_info=True,
                extra={"file_id": record.id, "operation": "upload_cleanup"},
            )


class FileDownloadService(_FileService):
    """Single responsibility: look up a record and return its bytes."""

    async def download(self, file_id: str) -> DownloadResult:
        """Return the file bytes, or a failure telling not-found apart from missing data."""
        try:
            record, data = await self._read(file_id)
        except ResourceNotFoundException as e:
            return DownloadResult.failure(MSG_FILE_NOT_FOUND, e.error_code)
        except DataInconsistentException as e:
            logger.warning(
                "File data missing for record %s: %s",
                file_id,
                e.details.get("reason"),
                extra={"file_id": file_id, "operation": "download"},
            )
            return DownloadResult.failure(MSG_FILE_DATA_NOT_FOUND, e.error_code)
        except Exception:
            logger.exception(
                "Error downloading file: %s",
                file_id,
                extra={"file_id": file_id, "operation": "download"},
            )
            return DownloadResult.failure(MSG_DOWNLOAD_FAILED, DOWNLOAD_ERROR)

        return DownloadResult(
            success=True,
            file_data=data,
            file_name=record.file_name,
            content_type=record.content_type,
        )

    async def _read(self, file_id: str) -> tuple[FileRecord, bytes]:
        record = await self.record_repo.get(file_id)
        if record is None:
            raise ResourceNotFoundException("file", file_id)
        storage_type = record.storage_type
        if storage_type is None:
            raise DataInconsistentException(file_id, "record has neither inline data nor a path")
        try:
            data = await self._backend_for(storage_type).fetch(record)
        except StorageNotFoundError as e:
            raise DataInconsistentException(file_id, e.message) from e
        return record, data


class FileDeletionService(_FileService):
    """Single responsibility: remove stored bytes, then the record."""

    async def delete(self, file_id: str) -> bool:
        """Return True iff the record existed and was removed. Never raises."""
        try:
            record = await self.record_repo.get(file_id)
            if record is None:
                return False
            storage_type = record.storage_type
            if storage_type is not None:
                await self._backend_for(storage_type).remove(record)
            await self.record_repo.remove(record)
            await self.record_repo.commit()
        except Exception:
            logger.exception(
                "Error deleting file: %s",
                file_id,
                extra={"file_id": file_id, "operation": "delete"},
            )
            await self._rollback(file_id, "delete")
            return False
        logger.info("Deleted file %s", file_id, extra={"file_id": file_id, "operation": "delete"})
        return True
