"""
Passphrase conversion endpoints
Request bodies are secrets: only sizes and error classes are logged
"""

from fastapi import APIRouter, Depends, HTTPException, status

from nicephrase.codec import bytes_to_passphrase, generate_passphrase, passphrase_to_bytes
from nicephrase.config import settings
from nicephrase.errors import NicewareError, RandomSourceError
from nicephrase.limits import MAX_PASSPHRASE_BYTES, MAX_PASSPHRASE_WORDS
from nicephrase.logging_config import log_conversion, log_random_failure, log_rejected
from nicephrase.schemas.passphrase import (
    BytesResponse,
    FromBytesRequest,
    GeneratedResponse,
    GenerateRequest,
    PassphraseResponse,
    ToBytesRequest,
)
from nicephrase.utils.hexstring import format_hex
from nicephrase.utils.payload_validation import decode_hex_field, split_passphrase_field
from nicephrase.wordlist import Dictionary, get_dictionary

router = APIRouter()


def _bad_request(kind: str, exc: NicewareError) -> HTTPException:
    log_rejected(kind, type(exc).__name__)
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


@router.post("/passphrase/from-bytes", response_model=PassphraseResponse)
async def from_bytes(
    request: FromBytesRequest,
    dictionary: Dictionary = Depends(get_dictionary),
):
    """Convert a hex byte string into a passphrase"""
    data = decode_hex_field(request.hex, field_name="hex", max_bytes=MAX_PASSPHRASE_BYTES)

    try:
        words = bytes_to_passphrase(data, dictionary)
    except NicewareError as exc:
        raise _bad_request("from-bytes", exc)

    log_conversion("from-bytes", len(data))
    return PassphraseResponse(passphrase=words, words=len(words))


@router.post("/passphrase/to-bytes", response_model=BytesResponse)
async def to_bytes(
    request: ToBytesRequest,
    dictionary: Dictionary = Depends(get_dictionary),
):
    """Convert a passphrase back into bytes (case-insensitive)"""
    words = split_passphrase_field(
        request.passphrase, field_name="passphrase", max_words=MAX_PASSPHRASE_WORDS
    )

    try:
        data = passphrase_to_bytes(words, dictionary)
    except NicewareError as exc:
        raise _bad_request("to-bytes", exc)

    log_conversion("to-bytes", len(data))
    return BytesResponse(hex=format_hex(data), bytes=len(data))


@router.post("/passphrase/generate", response_model=GeneratedResponse)
async def generate(
    request: GenerateRequest,
    dictionary: Dictionary = Depends(get_dictionary),
):
    """Generate a random passphrase and return both of its forms"""
    size = settings.DEFAULT_GENERATE_SIZE if request.size is None else request.size

    try:
        generated = generate_passphrase(size, dictionary=dictionary)
    except RandomSourceError:
        log_random_failure(size)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="random source unavailable",
        )
    except NicewareError as exc:
        raise _bad_request("generate", exc)

    log_conversion("generate", len(generated.data))
    return GeneratedResponse(
        hex=generated.hex(),
        passphrase=list(generated.words),
        words=len(generated.words),
        bytes=len(generated.data),
    )
