"""
Size limits shared by the codec, the CLI and the HTTP handlers.
"""

# Dictionary shape: one word per big-endian 16-bit value.
WORD_COUNT = 65536
WORD_BYTES = 2

# Byte limits for validated conversions and generation.
MIN_PASSPHRASE_BYTES = 2
MAX_PASSPHRASE_BYTES = 1024
MAX_PASSPHRASE_WORDS = MAX_PASSPHRASE_BYTES // WORD_BYTES

DEFAULT_GENERATE_BYTES = 8

# Longest entry any accepted word table may hold (the canonical table tops
# out at 28).
MAX_WORD_LENGTH = 64


def hex_max_length(byte_limit: int) -> int:
    """Return the longest hex string length for byte_limit bytes."""
    return byte_limit * 2


def passphrase_max_length(
    word_limit: int, max_word_length: int = MAX_WORD_LENGTH
) -> int:
    """Return the longest space-joined passphrase for word_limit words."""
    if word_limit <= 0:
        return 0
    return word_limit * (max_word_length + 1) - 1


MAX_HEX_CHARS = hex_max_length(MAX_PASSPHRASE_BYTES)
MAX_PASSPHRASE_CHARS = passphrase_max_length(MAX_PASSPHRASE_WORDS)
