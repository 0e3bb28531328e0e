# nicephrase Pydantic Schemas
from nicephrase.schemas.passphrase import (
    BytesResponse,
    FromBytesRequest,
    GeneratedResponse,
    GenerateRequest,
    PassphraseResponse,
    ToBytesRequest,
)

__all__ = [
    "FromBytesRequest", "PassphraseResponse",
    "ToBytesRequest", "BytesResponse",
    "GenerateRequest", "GeneratedResponse",
]
