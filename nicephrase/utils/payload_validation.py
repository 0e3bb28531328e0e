"""
Validation helpers for hex and passphrase request fields.
"""

from typing import List

from fastapi import HTTPException, status

from nicephrase.errors import InvalidHexError
from nicephrase.limits import hex_max_length
from nicephrase.utils.hexstring import parse_hex, split_passphrase


def decode_hex_field(value: str, *, field_name: str, max_bytes: int) -> bytes:
    """
    Decode and validate a hex field with a size cap.

    Raises:
      HTTPException(400) for invalid encoding or size violations.
    """
    if len(value) > hex_max_length(max_bytes):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} exceeds maximum size",
        )

    try:
        return parse_hex(value)
    except InvalidHexError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name}: {exc}",
        )


def split_passphrase_field(value: str, *, field_name: str, max_words: int) -> List[str]:
    """
    Split a space-separated passphrase field and cap its word count.

    Raises:
      HTTPException(400) for an empty passphrase or too many words.
    """
    words = split_passphrase(value)
    if not words:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} contains no words",
        )
    if len(words) > max_words:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{field_name} exceeds maximum of {max_words} words",
        )
    return words
