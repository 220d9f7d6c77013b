"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Per-request upload behaviour is derived from these
settings via Settings.upload_options() so the HTTP adapter never reads
the environment directly.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from uploader.core.constants import (
    DEFAULT_ALLOWED_EXTENSIONS,
    DEFAULT_MAX_FILE_SIZE,
    DEFAULT_STORAGE_PATH,
)
from uploader.domain.enums import StorageType

if TYPE_CHECKING:
    from uploader.application.dtos.file import UploadOptions


class Settings(BaseSettings):
    """Application settings loaded from environment and .env."""

    # App
    app_name: str = "uploader"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database (record repository)
    database_url: str = "sqlite+aiosqlite:///./uploader.db"
    database_echo: bool = False

    # Storage
    storage_backend: str = StorageType.FILESYSTEM.value
    storage_root: str = DEFAULT_STORAGE_PATH
    max_upload_size: int = DEFAULT_MAX_FILE_SIZE
    allowed_extensions: str = ",".join(DEFAULT_ALLOWED_EXTENSIONS)
    generate_unique_file_name: bool = True
    allow_multiple: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_storage(self) -> "Settings":
        """Validate storage backend name and size limit."""
        valid = set(StorageType.values())
        if self.storage_backend.lower() not in valid:
            raise ValueError(
                f"Invalid storage_backend '{self.storage_backend}'. "
                f"Must be one of: {', '.join(sorted(valid))}"
            )
        if self.max_upload_size <= 0:
            raise ValueError("max_upload_size must be a positive number of bytes")
        return self

    @property
    def allowed_extensions_list(self) -> list[str]:
        """Allowed extensions as a list; empty means no restriction."""
        return [e.strip() for e in self.allowed_extensions.split(",") if e.strip()]

    def upload_options(self) -> "UploadOptions":
        """Build UploadOptions from the current settings."""
        from uploader.application.dtos.file import UploadOptions

        return UploadOptions(
            storage_path=self.storage_root,
            storage_type=StorageType(self.storage_backend.lower()),
            max_file_size=self.max_upload_size,
            allowed_extensions=tuple(self.allowed_extensions_list),
            generate_unique_file_name=self.generate_unique_file_name,
            allow_multiple=self.allow_multiple,
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
