"""File API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class FileUploadResponse(BaseModel):
    """One upload outcome (POST /files and each item of POST /files/batch)."""

    model_config = ConfigDict(from_attributes=True)

    success: bool
    file_id: str | None = None
    file_name: str | None = None
    file_path: str | None = None
    file_size: int | None = None
    content_type: str | None = None
    uploaded_at: datetime | None = None
    error_message: str = ""
