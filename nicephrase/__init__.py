"""nicephrase - human-pronounceable passphrases for binary data.

Every two bytes map to one word of the 65,536-word niceware table, so keys,
tokens and seeds can be read aloud or typed without hex.

Usage:
    from nicephrase import bytes_to_passphrase, passphrase_to_bytes, generate_passphrase

    bytes_to_passphrase(bytes.fromhex("7a40bcb12c870b52"))
    # ['legalize', 'rich', 'couch', 'axel']

    passphrase_to_bytes(["Legalize", "RICH", "couch", "axel"]).hex()
    # '7a40bcb12c870b52'

    generated = generate_passphrase(16)
    generated.hex(), generated.phrase
"""

__version__ = "1.0.0"

from nicephrase.codec import (
    GeneratedPassphrase,
    bytes_size,
    bytes_to_passphrase,
    generate_passphrase,
    passphrase_size,
    passphrase_to_bytes,
)
from nicephrase.errors import (
    DictionaryError,
    InvalidHexError,
    NicewareError,
    OddSizeError,
    PassphraseSizeError,
    RandomSourceError,
    SizeTooLargeError,
    SizeTooSmallError,
    WordNotFoundError,
)
from nicephrase.limits import MAX_PASSPHRASE_BYTES, MIN_PASSPHRASE_BYTES
from nicephrase.wordlist import Dictionary, get_dictionary, load_dictionary

__all__ = [
    "GeneratedPassphrase",
    "bytes_size",
    "bytes_to_passphrase",
    "generate_passphrase",
    "passphrase_size",
    "passphrase_to_bytes",
    "DictionaryError",
    "InvalidHexError",
    "NicewareError",
    "OddSizeError",
    "PassphraseSizeError",
    "RandomSourceError",
    "SizeTooLargeError",
    "SizeTooSmallError",
    "WordNotFoundError",
    "MAX_PASSPHRASE_BYTES",
    "MIN_PASSPHRASE_BYTES",
    "Dictionary",
    "get_dictionary",
    "load_dictionary",
]
