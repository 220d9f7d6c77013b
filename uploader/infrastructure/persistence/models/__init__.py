"""ORM models."""

from uploader.infrastructure.persistence.models.file_record import StoredFile

__all__ = ["StoredFile"]
