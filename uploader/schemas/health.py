"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """GET /health: liveness plus the active upload configuration."""

    status: str = Field(default="ok", description="Service status")
    version: str
    storage_backend: str = Field(description="Backend new uploads are written to")
    max_upload_size: int = Field(description="Per-file limit in bytes")
