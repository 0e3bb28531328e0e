"""
Text forms used at the edges: hex byte strings and space-separated words.
"""

import re
from typing import Iterable, List

from nicephrase.errors import InvalidHexError

_HEX_PATTERN = re.compile(r"[0-9a-fA-F]*")


def parse_hex(text: str) -> bytes:
    """
    Parse a strict hex string (no prefix, no whitespace) into bytes.

    Raises:
      InvalidHexError for empty, odd-length or non-hex input.
    """
    if len(text) == 0:
        raise InvalidHexError(text, "input looks empty to me")
    if len(text) % 2 != 0:
        raise InvalidHexError(
            text,
            f"input must be an even length, {len(text)} is not an even number",
        )
    if not _HEX_PATTERN.fullmatch(text):
        raise InvalidHexError(
            text,
            f"unable to convert into passphrase: {text} (is this a valid hex string?)",
        )
    return bytes.fromhex(text)


def format_hex(data: bytes) -> str:
    return bytes(data).hex()


def split_passphrase(text: str) -> List[str]:
    """Split on any run of whitespace"""
    return text.split()


def join_passphrase(words: Iterable[str]) -> str:
    return " ".join(words)
