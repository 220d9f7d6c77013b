"""Filename sanitization for names that end up on disk."""

import re

_SEPARATORS = re.compile(r"[\\/]")


def sanitize_filename(filename: str) -> str:
    """Reduce a client-supplied filename to a safe basename.

    Strips directory components (both separators), NUL bytes, and leading or
    trailing dots and spaces. The extension is preserved.

    Args:
        filename: Name as reported by the upload source.

    Returns:
        The sanitized basename.

    Raises:
        ValueError: If nothing usable remains.
    """
    name = _SEPARATORS.split(filename or "")[-1]
    name = name.replace("\x00", "").strip(". ")
    if not name:
        raise ValueError("Filename is empty or invalid after sanitization")
    return name
