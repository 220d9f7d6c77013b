"""Health check endpoint. Reads settings only; no database round trip."""

from fastapi import APIRouter

from uploader.core.config import get_settings
from uploader.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(
        version=settings.app_version,
        storage_backend=settings.storage_backend.lower(),
        max_upload_size=settings.max_upload_size,
    )
