"""Application services."""

from uploader.application.services.file_validator import FileValidator, ValidationOutcome

__all__ = ["FileValidator", "ValidationOutcome"]
