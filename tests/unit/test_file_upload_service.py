"""Unit tests for FileUploadService (single and batch uploads)."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from uploader.core.constants import (
    MEGABYTE,
    MSG_INVALID_FILE_NAME,
    MSG_MULTIPLE_NOT_ALLOWED,
    MSG_NO_FILE_SELECTED,
    MSG_UPLOAD_FAILED,
)
from uploader.domain.enums import StorageType
from uploader.infrastructure.exceptions import PersistenceError, StorageDeleteError
from uploader.infrastructure.external.sources import InMemoryUploadSource


def _png(name: str = "original.png", size: int = 16) -> InMemoryUploadSource:
    return InMemoryUploadSource(b"\x89PNG" + b"\x00" * (size - 4), name, "image/png")


def _files_in(directory: Path) -> list[Path]:
    return sorted(directory.iterdir()) if directory.exists() else []


@pytest.mark.asyncio
async def test_missing_file_is_rejected(upload_service, make_options, record_repo) -> None:
    result = await upload_service.upload(None, make_options())
    assert result.success is False
    assert result.error_message == MSG_NO_FILE_SELECTED
    assert record_repo.records == {}


@pytest.mark.asyncio
async def test_two_megabyte_png_to_filesystem(upload_service, make_options, record_repo) -> None:
    """2MB png, 5MB limit, unique names: stored as {id}_original.png."""
    options = make_options(max_file_size=5 * MEGABYTE, allowed_extensions=(".png", ".jpg"))
    result = await upload_service.upload(_png(size=2 * MEGABYTE), options)

    assert result.success is True
    assert result.error_message == ""
    assert len(result.file_id) == 32
    assert result.file_name == f"{result.file_id}_original.png"
    assert result.file_size == 2 * MEGABYTE
    assert result.content_type == "image/png"
    assert result.uploaded_at is not None
    assert Path(result.file_path).is_file()
    assert Path(result.file_path).name == result.file_name

    record = record_repo.records[result.file_id]
    assert record.storage_path == result.file_path
    assert record.inline_data is None
    assert record.file_size == 2 * MEGABYTE


@pytest.mark.asyncio
async def test_oversized_file_fails_without_side_effects(
    upload_service, make_options, record_repo, storage_dir
) -> None:
    options = make_options(max_file_size=1 * MEGABYTE)
    result = await upload_service.upload(_png(size=2 * MEGABYTE), options)

    assert result.success is False
    assert "cannot exceed 1MB" in result.error_message
    assert result.error_code == "VALIDATION_ERROR"
    assert result.file_id is None
    assert record_repo.records == {}
    assert record_repo.commits == 0
    assert _files_in(storage_dir) == []


@pytest.mark.asyncio
async def test_disallowed_extension_fails(upload_service, make_options, storage_dir) -> None:
    result = await upload_service.upload(_png("script.exe"), make_options())
    assert result.success is False
    assert "Allowed extensions: .png, .jpg" in result.error_message
    assert _files_in(storage_dir) == []


@pytest.mark.asyncio
async def test_uppercase_extension_accepted(upload_service, make_options) -> None:
    result = await upload_service.upload(_png("A.PNG"), make_options())
    assert result.success is True
    assert result.file_name.endswith("_A.PNG")


@pytest.mark.asyncio
async def test_original_name_kept_when_unique_names_disabled(upload_service, make_options) -> None:
    result = await upload_service.upload(_png("plain.png"), make_options(generate_unique_file_name=False))
    assert result.success is True
    assert result.file_name == "plain.png"
    assert Path(result.file_path).name == "plain.png"


@pytest.mark.asyncio
async def test_directory_components_stripped_from_name(
    upload_service, make_options, storage_dir
) -> None:
    result = await upload_service.upload(_png("../../outside.png"), make_options())
    assert result.success is True
    assert Path(result.file_path).parent == storage_dir.resolve()
    assert result.file_name == f"{result.file_id}_outside.png"


@pytest.mark.asyncio
async def test_unusable_name_fails_validation(upload_service, make_options) -> None:
    result = await upload_service.upload(_png(".."), make_options(allowed_extensions=()))
    assert result.success is False
    assert result.error_message == MSG_INVALID_FILE_NAME


@pytest.mark.asyncio
async def test_identifiers_are_fresh_per_upload(upload_service, make_options) -> None:
    """Same bytes twice: two distinct ids, not content addressed."""
    first = await upload_service.upload(_png(), make_options())
    second = await upload_service.upload(_png(), make_options())
    assert first.file_id != second.file_id


@pytest.mark.asyncio
async def test_database_backend_stores_inline(
    upload_service, make_options, record_repo, storage_dir
) -> None:
    content = b"\x89PNG" + bytes(range(60))
    source = InMemoryUploadSource(content, "inline.png", "image/png")
    result = await upload_service.upload(source, make_options(storage_type=StorageType.DATABASE))

    assert result.success is True
    assert result.file_path is None
    record = record_repo.records[result.file_id]
    assert record.inline_data == content
    assert record.storage_path is None
    assert record.storage_type is StorageType.DATABASE
    assert _files_in(storage_dir) == []


@pytest.mark.asyncio
async def test_commit_failure_removes_written_file(
    upload_service, make_options, record_repo, storage_dir, caplog
) -> None:
    record_repo.commit = AsyncMock(side_effect=PersistenceError("commit", "database is locked"))

    with caplog.at_level(logging.ERROR):
        result = await upload_service.upload(_png(), make_options())

    assert result.success is False
    assert result.error_message == MSG_UPLOAD_FAILED
    assert result.error_code == "UPLOAD_ERROR"
    assert "database is locked" not in result.error_message
    assert record_repo.records == {}
    assert record_repo.rollbacks == 1
    assert _files_in(storage_dir) == []
    assert "Error uploading file: original.png" in caplog.text


@pytest.mark.asyncio
async def test_failed_cleanup_logs_orphan_and_still_reports_failure(
    record_repo, backends, make_options, storage_dir, caplog
) -> None:
    from uploader.application.use_cases.files import FileUploadService

    fs_backend = backends[StorageType.FILESYSTEM]
    fs_backend.remove = AsyncMock(side_effect=StorageDeleteError("x", "read-only filesystem"))
    record_repo.commit = AsyncMock(side_effect=PersistenceError("commit", "disk full"))
    service = FileUploadService(record_repo, backends)

    with caplog.at_level(logging.ERROR):
        result = await service.upload(_png(), make_options())

    assert result.success is False
    assert "Orphaned file left after failed upload" in caplog.text
    assert len(_files_in(storage_dir)) == 1


@pytest.mark.asyncio
async def test_short_payload_is_treated_as_write_failure(
    upload_service, make_options, record_repo, storage_dir
) -> None:
    """Declared length must match the bytes actually written."""
    source = InMemoryUploadSource(b"\x89PNG1234", "short.png", "image/png", length=100)
    result = await upload_service.upload(source, make_options())
    assert result.success is False
    assert result.error_message == MSG_UPLOAD_FAILED
    assert record_repo.records == {}
    assert _files_in(storage_dir) == []


@pytest.mark.asyncio
async def test_short_payload_keeps_earlier_upload_with_same_name(
    upload_service, download_service, make_options, record_repo
) -> None:
    """With unique names off, a failed overwrite leaves the stored file readable."""
    options = make_options(generate_unique_file_name=False)
    first = await upload_service.upload(_png("plain.png"), options)
    assert first.success is True
    original = Path(first.file_path).read_bytes()

    short = InMemoryUploadSource(b"\x89PNG", "plain.png", "image/png", length=100)
    result = await upload_service.upload(short, options)
    assert result.success is False
    assert result.error_message == MSG_UPLOAD_FAILED
    assert list(record_repo.records) == [first.file_id]

    download = await download_service.download(first.file_id)
    assert download.success is True
    assert download.file_data == original


@pytest.mark.asyncio
async def test_unexpected_validator_error_is_contained(record_repo, backends, make_options) -> None:
    from uploader.application.use_cases.files import FileUploadService

    validator = MagicMock()
    validator.validate.side_effect = RuntimeError("boom")
    service = FileUploadService(record_repo, backends, validator=validator)
    result = await service.upload(_png(), make_options())
    assert result.success is False
    assert result.error_message == MSG_UPLOAD_FAILED


@pytest.mark.asyncio
async def test_batch_rejected_when_multiple_not_allowed(
    upload_service, make_options, record_repo, storage_dir
) -> None:
    files = [_png("a.png"), _png("b.png"), _png("c.png")]
    results = await upload_service.upload_batch(files, make_options(allow_multiple=False))

    assert len(results) == 3
    assert all(r.success is False for r in results)
    assert {r.error_message for r in results} == {MSG_MULTIPLE_NOT_ALLOWED}
    assert record_repo.records == {}
    assert _files_in(storage_dir) == []


@pytest.mark.asyncio
async def test_single_file_batch_allowed_without_multiple(upload_service, make_options) -> None:
    results = await upload_service.upload_batch([_png()], make_options(allow_multiple=False))
    assert [r.success for r in results] == [True]


@pytest.mark.asyncio
async def test_batch_continues_past_failures_in_order(
    upload_service, make_options, record_repo
) -> None:
    files = [_png("first.png"), _png("bad.gif"), None, _png("last.jpg")]
    results = await upload_service.upload_batch(files, make_options())

    assert [r.success for r in results] == [True, False, False, True]
    assert results[0].file_name.endswith("_first.png")
    assert "'.gif'" in results[1].error_message
    assert results[2].error_message == MSG_NO_FILE_SELECTED
    assert results[3].file_name.endswith("_last.jpg")
    assert len(record_repo.records) == 2


@pytest.mark.asyncio
async def test_empty_batch_returns_no_results(upload_service, make_options) -> None:
    assert await upload_service.upload_batch([], make_options()) == []
    assert await upload_service.upload_batch(None, make_options()) == []


def test_services_require_injected_backends(record_repo) -> None:
    from uploader.application.use_cases.files import FileUploadService

    with pytest.raises(TypeError):
        FileUploadService(record_repo)
