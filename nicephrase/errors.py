"""
Error taxonomy for passphrase conversion
"""

from typing import Optional

from nicephrase.limits import MAX_PASSPHRASE_BYTES, MIN_PASSPHRASE_BYTES


class NicewareError(Exception):
    """Base class for every error raised by nicephrase"""


class PassphraseSizeError(NicewareError, ValueError):
    """Byte count is outside the accepted shape"""

    def __init__(self, size: int, message: Optional[str] = None):
        self.size = size
        super().__init__(message or (
            f"expected a number between {MIN_PASSPHRASE_BYTES} and "
            f"{MAX_PASSPHRASE_BYTES}, got {size}"
        ))


class SizeTooSmallError(PassphraseSizeError):
    """Fewer than MIN_PASSPHRASE_BYTES bytes"""


class SizeTooLargeError(PassphraseSizeError):
    """More than MAX_PASSPHRASE_BYTES bytes"""


class OddSizeError(PassphraseSizeError):
    """Byte count is not a multiple of two"""

    def __init__(self, size: int):
        super().__init__(size, f"expected an even number, got: {size}")


class WordNotFoundError(NicewareError, LookupError):
    """
    A passphrase word is not in the dictionary.

    The offending word and its position travel with the exception,
    so concurrent decodes never share diagnostics.
    """

    def __init__(self, word: str, position: Optional[int] = None):
        self.word = word
        self.position = position
        super().__init__(f"invalid word entered: {word}")


class RandomSourceError(NicewareError):
    """The random source could not supply the requested bytes"""

    def __init__(self, size: int):
        self.size = size
        super().__init__(f"random source failed to produce {size} bytes")


class DictionaryError(NicewareError):
    """The word table violates its contract or could not be loaded"""


class InvalidHexError(NicewareError, ValueError):
    """Text is not a usable hex byte string"""

    def __init__(self, value: str, message: str):
        self.value = value
        super().__init__(message)
