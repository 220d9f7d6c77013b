"""File API: thin routes delegating to FileUploadService, FileDownloadService, and FileDeletionService."""

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, File, Response, UploadFile

from uploader.api.v1.dependencies import (
    get_file_deletion_service,
    get_file_download_service,
    get_file_upload_service,
    get_upload_options,
)
from uploader.application.dtos.file import UploadOptions
from uploader.application.use_cases.files import (
    FileDeletionService,
    FileDownloadService,
    FileUploadService,
)
from uploader.domain.exceptions import ResourceNotFoundException, UploaderException
from uploader.infrastructure.external.sources import UploadFileSource
from uploader.schemas.file import FileUploadResponse

router = APIRouter()


@router.post("", response_model=FileUploadResponse, status_code=201)
async def upload_file(
    upload_svc: Annotated[FileUploadService, Depends(get_file_upload_service)],
    options: Annotated[UploadOptions, Depends(get_upload_options)],
    file: UploadFile | None = File(None),
):
    """Upload one file (multipart field 'file')."""
    source = UploadFileSource(file) if file is not None else None
    result = await upload_svc.upload(source, options)
    if not result.success:
        raise UploaderException(result.error_message, result.error_code)
    return FileUploadResponse.model_validate(result)


@router.post("/batch", response_model=list[FileUploadResponse])
async def upload_files(
    upload_svc: Annotated[FileUploadService, Depends(get_file_upload_service)],
    options: Annotated[UploadOptions, Depends(get_upload_options)],
    files: list[UploadFile] = File(...),
):
    """Upload several files (multipart field 'files'); one result per file, in order."""
    results = await upload_svc.upload_batch([UploadFileSource(f) for f in files], options)
    return [FileUploadResponse.model_validate(r) for r in results]


@router.get("/{file_id}")
async def download_file(
    file_id: str,
    download_svc: Annotated[FileDownloadService, Depends(get_file_download_service)],
) -> Response:
    """Return the file bytes with their content type."""
    result = await download_svc.download(file_id)
    if not result.success:
        raise UploaderException(result.error_message, result.error_code, {"file_id": file_id})
    return Response(
        content=result.file_data,
        media_type=result.content_type,
        headers={
            "Content-Disposition": f"attachment; filename*=utf-8''{quote(result.file_name or file_id)}"
        },
    )


@router.delete("/{file_id}", status_code=204)
async def delete_file(
    file_id: str,
    delete_svc: Annotated[FileDeletionService, Depends(get_file_deletion_service)],
) -> Response:
    """Delete the file bytes and record. 404 when nothing was deleted."""
    if not await delete_svc.delete(file_id):
        raise ResourceNotFoundException("file", file_id)
    return Response(status_code=204)
