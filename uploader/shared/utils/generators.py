"""Identifier generators for stored files."""

import secrets

FILE_ID_BYTES = 16  # 128 bits


def generate_file_id() -> str:
    """Generate a random, URL-safe file identifier with 128 bits of entropy.

    Identifiers are never derived from content; two uploads of the same
    bytes get different ids.

    Returns:
        32-character lowercase hex string.
    """
    return secrets.token_hex(FILE_ID_BYTES)
