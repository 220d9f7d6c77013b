"""Validates uploaded files against size, extension, and multiplicity rules."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import PurePath

from uploader.application.dtos.file import FileValidationRules
from uploader.application.interfaces.sources import IUploadSource
from uploader.core.constants import MEGABYTE, MSG_MULTIPLE_NOT_ALLOWED


@dataclass(frozen=True)
class ValidationOutcome:
    """Result of a validation; truthy when valid."""

    is_valid: bool
    error_message: str = ""
    rule: str | None = None

    def __bool__(self) -> bool:
        return self.is_valid


_VALID = ValidationOutcome(is_valid=True)


def _format_megabytes(size: int) -> str:
    value = size / MEGABYTE
    if value == int(value):
        return f"{int(value)}MB"
    return f"{value:.2f}".rstrip("0").rstrip(".") + "MB"


def _extension(file_name: str) -> str:
    """Text from the last dot of the final component, lowercased.

    Unlike PurePath.suffix, a name that is only an extension (".png") counts
    as having one; a trailing dot ("photo.") does not.
    """
    name = PurePath(file_name or "").name
    dot = name.rfind(".")
    if dot < 0 or dot == len(name) - 1:
        return ""
    return name[dot:].lower()


class FileValidator:
    """Checks files against FileValidationRules. Stateless; safe to share.

    Rules run in order and the first failure wins: size, then extension
    (only when allowed_extensions is non-empty, compared case-insensitively),
    then multiplicity for collections. A None file is valid here; requiring
    a file is the caller's concern.
    """

    def validate(
        self, file: IUploadSource | None, rules: FileValidationRules
    ) -> ValidationOutcome:
        """Validate a single file."""
        if file is None:
            return _VALID

        if file.length > rules.max_file_size:
            return ValidationOutcome(
                is_valid=False,
                error_message=f"File size cannot exceed {_format_megabytes(rules.max_file_size)}.",
                rule="size",
            )

        if rules.allowed_extensions:
            allowed = {e.lower() for e in rules.allowed_extensions}
            extension = _extension(file.file_name)
            if extension not in allowed:
                return ValidationOutcome(
                    is_valid=False,
                    error_message=(
                        f"File extension '{extension}' is not allowed. "
                        f"Allowed extensions: {', '.join(rules.allowed_extensions)}."
                    ),
                    rule="extension",
                )

        return _VALID

    def validate_multiplicity(
        self, files: Sequence[IUploadSource | None], rules: FileValidationRules
    ) -> ValidationOutcome:
        """Batch-level rule: reject the whole batch when multiple files are not allowed."""
        if not rules.allow_multiple and len(files) > 1:
            return ValidationOutcome(
                is_valid=False,
                error_message=MSG_MULTIPLE_NOT_ALLOWED,
                rule="multiplicity",
            )
        return _VALID

    def validate_many(
        self, files: Sequence[IUploadSource | None] | None, rules: FileValidationRules
    ) -> ValidationOutcome:
        """Validate a collection: multiplicity first, then every element in order."""
        if files is None:
            return _VALID
        outcome = self.validate_multiplicity(files, rules)
        if not outcome:
            return outcome
        for file in files:
            outcome = self.validate(file, rules)
            if not outcome:
                return outcome
        return _VALID
