"""Tests for mapping UploaderException error codes to HTTP responses."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from uploader.application.use_cases.files.file_operations import DOWNLOAD_ERROR, UPLOAD_ERROR
from uploader.core.exception_handlers import ERROR_CODE_STATUS, register_exception_handlers
from uploader.domain.exceptions import UploaderException


def _app_raising(error_code: str) -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    async def boom():
        raise UploaderException("failed", error_code, {"file_id": "abc"})

    return app


def test_map_covers_only_result_error_codes() -> None:
    assert set(ERROR_CODE_STATUS) == {
        "VALIDATION_ERROR",
        "RESOURCE_NOT_FOUND",
        "DATA_INCONSISTENT",
        UPLOAD_ERROR,
        DOWNLOAD_ERROR,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error_code", "status"),
    [
        ("VALIDATION_ERROR", 400),
        ("RESOURCE_NOT_FOUND", 404),
        ("DATA_INCONSISTENT", 410),
        (UPLOAD_ERROR, 500),
        ("SOMETHING_ELSE", 400),
    ],
)
async def test_error_code_sets_status_and_body(error_code: str, status: int) -> None:
    transport = ASGITransport(app=_app_raising(error_code))
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        response = await ac.get("/boom")
    assert response.status_code == status
    assert response.json() == {
        "error": error_code,
        "message": "failed",
        "details": {"file_id": "abc"},
    }
