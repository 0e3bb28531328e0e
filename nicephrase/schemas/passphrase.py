"""
Passphrase conversion schemas
"""

from pydantic import BaseModel, Field
from typing import List, Optional

from nicephrase.limits import MAX_HEX_CHARS, MAX_PASSPHRASE_CHARS


class FromBytesRequest(BaseModel):
    """Convert a hex byte string into a passphrase"""
    hex: str = Field(
        ...,
        description="Hex byte string, e.g. 7a40bcb12c870b52",
        min_length=1,
        max_length=MAX_HEX_CHARS,
    )


class PassphraseResponse(BaseModel):
    """Passphrase in canonical dictionary spelling"""
    passphrase: List[str]
    words: int


class ToBytesRequest(BaseModel):
    """Convert a space-separated passphrase back into bytes"""
    passphrase: str = Field(
        ...,
        description="Space-separated words, e.g. legalize rich couch axel",
        min_length=1,
        max_length=MAX_PASSPHRASE_CHARS,
    )


class BytesResponse(BaseModel):
    """Decoded bytes as lowercase hex"""
    hex: str
    bytes: int


class GenerateRequest(BaseModel):
    """Generate a random passphrase"""
    size: Optional[int] = Field(
        default=None,
        description="Number of random bytes (even, 2-1024); defaults to server setting",
    )


class GeneratedResponse(BaseModel):
    """Random passphrase with its byte form"""
    hex: str
    passphrase: List[str]
    words: int
    bytes: int
