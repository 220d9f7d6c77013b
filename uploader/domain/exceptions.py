"""Domain exceptions for the uploader.

Defines domain-level exceptions for expected failure conditions. These are
independent of infrastructure concerns. Orchestrators turn them into
structured results; the presentation layer maps any that escape to HTTP
responses in exception handlers.
"""

from typing import Any


class UploaderException(Exception):
    """Base exception for all uploader errors.

    All custom exceptions inherit from this class to allow consistent error
    handling and logging.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, file_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(UploaderException):
    """Raised when a file fails size, extension, or multiplicity rules."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: User-facing reason for the rejection.
            field: Optional rule or attribute that failed (e.g. 'size').
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(UploaderException):
    """Raised when no record exists for the requested identifier."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'file').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DataInconsistentException(UploaderException):
    """Raised when a record exists but its bytes cannot be retrieved."""

    def __init__(self, file_id: str, reason: str) -> None:
        super().__init__(
            f"File data not found for record: {file_id}",
            "DATA_INCONSISTENT",
            {"file_id": file_id, "reason": reason},
        )
