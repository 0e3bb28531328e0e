"""
Niceware word table (65536 words)
Every 16-bit value maps to exactly one word, so each word carries two bytes.
The canonical table ships in the niceware package; a file may replace it.
"""

import bisect
import hashlib
import re
import string
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from nicephrase.config import settings
from nicephrase.errors import DictionaryError
from nicephrase.limits import MAX_WORD_LENGTH, WORD_COUNT
from nicephrase.logging_config import log_custom_wordlist

# SHA-256 of the canonical table, one word per line with a trailing newline.
# Reordering or substituting any entry changes every passphrase.
CANONICAL_FINGERPRINT = (
    "72db9a37d5ff13aa59a18903895c8a29978c661b773a159fce01233d42e3b5b2"
)

_ASCII_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_WORD_PATTERN = re.compile(r"[!-~]+")


def fold_case(word: str) -> str:
    """Lower-case ASCII letters only; other characters are left untouched."""
    return word.translate(_ASCII_FOLD)


def _validate_table(words: Tuple[str, ...], folded: Tuple[str, ...]) -> None:
    if len(words) != WORD_COUNT:
        raise DictionaryError(
            f"word table must contain exactly {WORD_COUNT} words, got {len(words)}"
        )

    for index, word in enumerate(words):
        if not isinstance(word, str) or not _WORD_PATTERN.fullmatch(word):
            raise DictionaryError(
                f"word {index} must be non-empty printable ASCII without spaces: {word!r}"
            )
        if len(word) > MAX_WORD_LENGTH:
            raise DictionaryError(
                f"word {index} is longer than {MAX_WORD_LENGTH} characters: {word!r}"
            )
        if index == 0:
            continue
        previous = folded[index - 1]
        if previous == folded[index]:
            raise DictionaryError(
                f"word {index} duplicates word {index - 1} ignoring case: {word!r}"
            )
        if previous > folded[index]:
            raise DictionaryError(
                f"word table is not sorted ignoring case at word {index}: {word!r}"
            )


class Dictionary:
    """
    Immutable sorted word table.

    Lookups by index are direct; lookups by word are a binary search over
    ASCII case-folded keys, so "Zyzzyva" and "zyzzyva" find the same entry.
    """

    def __init__(self, words: Iterable[str]):
        self._words: Tuple[str, ...] = tuple(words)
        self._folded: Tuple[str, ...] = tuple(
            fold_case(word) if isinstance(word, str) else word
            for word in self._words
        )
        _validate_table(self._words, self._folded)
        self._max_word_length = max(len(word) for word in self._words)
        self._fingerprint: Optional[str] = None

    @property
    def max_word_length(self) -> int:
        """Length of the longest entry"""
        return self._max_word_length

    @property
    def fingerprint(self) -> str:
        """Hex SHA-256 of the table, one word per line"""
        if self._fingerprint is None:
            content = "".join(f"{word}\n" for word in self._words)
            self._fingerprint = hashlib.sha256(content.encode("ascii")).hexdigest()
        return self._fingerprint

    @property
    def is_canonical(self) -> bool:
        return self.fingerprint == CANONICAL_FINGERPRINT

    def word_at(self, index: int) -> str:
        """Return the word for a 16-bit index."""
        if not 0 <= index < WORD_COUNT:
            raise IndexError(f"word index out of range: {index}")
        return self._words[index]

    def index_of(self, word: str) -> Optional[int]:
        """Return the index of word ignoring ASCII case, or None."""
        key = fold_case(word)
        position = bisect.bisect_left(self._folded, key)
        if position < WORD_COUNT and self._folded[position] == key:
            return position
        return None

    def __len__(self) -> int:
        return WORD_COUNT

    def __getitem__(self, index: int) -> str:
        return self.word_at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.index_of(word) is not None

    def __repr__(self) -> str:
        return f"Dictionary(words={WORD_COUNT}, fingerprint={self.fingerprint[:12]})"


def _read_word_file(path: Union[str, Path]) -> Sequence[str]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return [line.strip() for line in f if line.strip()]
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryError(f"unable to read word table {path}: {exc}") from exc


def load_dictionary(
    path: Optional[Union[str, Path]] = None,
    *,
    allow_custom: bool = False,
) -> Dictionary:
    """
    Build a Dictionary from a word file, or from the niceware package.

    A table that is not the canonical niceware table is refused unless
    allow_custom is set, since its passphrases cannot be decoded elsewhere.
    """
    if path is None:
        from niceware.wordlist import WORD_LIST

        words: Sequence[str] = WORD_LIST
    else:
        words = _read_word_file(path)

    dictionary = Dictionary(words)

    if not dictionary.is_canonical:
        if not allow_custom:
            raise DictionaryError(
                "word table is not the canonical niceware table "
                f"(fingerprint {dictionary.fingerprint})"
            )
        log_custom_wordlist(str(path), dictionary.fingerprint)

    return dictionary


@lru_cache(maxsize=1)
def get_dictionary() -> Dictionary:
    """Process-wide dictionary built from settings"""
    return load_dictionary(
        settings.WORDLIST_PATH,
        allow_custom=settings.ALLOW_CUSTOM_WORDLIST,
    )
