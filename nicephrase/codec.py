"""
Bytes <-> passphrase conversion

Each big-endian byte pair selects one dictionary word, so a passphrase of
N words always decodes to exactly 2*N bytes and back again.
"""

import secrets
import struct
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Tuple, Union

from nicephrase.errors import (
    OddSizeError,
    RandomSourceError,
    SizeTooLargeError,
    SizeTooSmallError,
    WordNotFoundError,
)
from nicephrase.limits import MAX_PASSPHRASE_BYTES, MIN_PASSPHRASE_BYTES, WORD_BYTES
from nicephrase.wordlist import Dictionary, get_dictionary

BytesLike = Union[bytes, bytearray, memoryview]
RandomSource = Callable[[int], bytes]


@dataclass(frozen=True)
class GeneratedPassphrase:
    """A random value in both of its forms; repr never shows either"""
    data: bytes = field(repr=False)
    words: Tuple[str, ...] = field(repr=False)

    @property
    def phrase(self) -> str:
        return " ".join(self.words)

    def hex(self) -> str:
        return self.data.hex()


def check_size(size: int) -> None:
    """
    Validate a byte count for encoding or generation.

    Raises:
      SizeTooSmallError, SizeTooLargeError or OddSizeError, in that order.
    """
    if size < MIN_PASSPHRASE_BYTES:
        raise SizeTooSmallError(size)
    if size > MAX_PASSPHRASE_BYTES:
        raise SizeTooLargeError(size)
    if size % WORD_BYTES != 0:
        raise OddSizeError(size)


def _as_bytes(data: BytesLike) -> bytes:
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected a bytes-like object, got {type(data).__name__}")
    return bytes(data)


def _word_indices(payload: bytes) -> tuple:
    return struct.unpack(f">{len(payload) // WORD_BYTES}H", payload)


def _resolve(dictionary: Optional[Dictionary]) -> Dictionary:
    return get_dictionary() if dictionary is None else dictionary


def _as_words(words: Sequence[str]) -> Sequence[str]:
    if isinstance(words, (str, bytes)):
        raise TypeError("expected a sequence of words; split the passphrase first")
    return words


def bytes_to_passphrase(
    data: BytesLike, dictionary: Optional[Dictionary] = None
) -> List[str]:
    """Encode an even number of bytes (2..1024) as dictionary words."""
    payload = _as_bytes(data)
    check_size(len(payload))
    dictionary = _resolve(dictionary)
    return [dictionary.word_at(index) for index in _word_indices(payload)]


def passphrase_size(data: BytesLike, dictionary: Optional[Dictionary] = None) -> int:
    """
    Length of the space-joined passphrase for data, without building it.

    Validates exactly like bytes_to_passphrase.
    """
    payload = _as_bytes(data)
    check_size(len(payload))
    dictionary = _resolve(dictionary)
    indices = _word_indices(payload)
    letters = sum(len(dictionary.word_at(index)) for index in indices)
    return letters + len(indices) - 1


def passphrase_to_bytes(
    words: Sequence[str], dictionary: Optional[Dictionary] = None
) -> bytes:
    """
    Decode dictionary words back into bytes, ignoring ASCII case.

    Raises:
      WordNotFoundError for the first word that is not in the dictionary.
    """
    words = _as_words(words)
    dictionary = _resolve(dictionary)
    indices = []

    for position, word in enumerate(words):
        # Longer than any entry: no need to search
        if len(word) > dictionary.max_word_length:
            raise WordNotFoundError(word, position)

        index = dictionary.index_of(word)
        if index is None:
            raise WordNotFoundError(word, position)
        indices.append(index)

    return struct.pack(f">{len(indices)}H", *indices)


def bytes_size(words: Sequence[str]) -> int:
    """Number of bytes passphrase_to_bytes produces for words."""
    return len(_as_words(words)) * WORD_BYTES


def generate_passphrase(
    size: int,
    *,
    random_bytes: RandomSource = secrets.token_bytes,
    dictionary: Optional[Dictionary] = None,
) -> GeneratedPassphrase:
    """
    Generate a random passphrase from size bytes of entropy.

    The size is validated before the random source is used. Entropy
    failures are not retried.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    check_size(size)

    try:
        data = random_bytes(size)
    except OSError as exc:
        raise RandomSourceError(size) from exc

    if not isinstance(data, (bytes, bytearray)) or len(data) != size:
        raise RandomSourceError(size)

    data = bytes(data)
    return GeneratedPassphrase(
        data=data, words=tuple(bytes_to_passphrase(data, dictionary))
    )
