"""
Tests for bytes <-> passphrase conversion
"""

import random
from concurrent.futures import ThreadPoolExecutor
from typing import List

import pytest

from nicephrase.codec import (
    bytes_size,
    bytes_to_passphrase,
    passphrase_size,
    passphrase_to_bytes,
)
from nicephrase.errors import (
    OddSizeError,
    PassphraseSizeError,
    SizeTooLargeError,
    SizeTooSmallError,
    WordNotFoundError,
)
from nicephrase.wordlist import Dictionary


def test_known_vector_encodes(vector_bytes: bytes, vector_words: List[str]):
    assert bytes_to_passphrase(vector_bytes) == vector_words


def test_known_vector_decodes(vector_bytes: bytes, vector_words: List[str]):
    assert passphrase_to_bytes(vector_words) == vector_bytes


def test_first_and_last_words():
    assert bytes_to_passphrase(b"\x00\x00") == ["a"]
    assert bytes_to_passphrase(b"\xff\xff") == ["zyzzyva"]


def test_pairs_are_read_big_endian():
    assert bytes_to_passphrase(bytes.fromhex("7a40bcb12c870b52")) == [
        "legalize", "rich", "couch", "axel",
    ]
    assert bytes_to_passphrase(b"\x00\x01") == ["aah"]


def test_accepts_any_bytes_like_input(vector_bytes: bytes, vector_words: List[str]):
    assert bytes_to_passphrase(bytearray(vector_bytes)) == vector_words
    assert bytes_to_passphrase(memoryview(vector_bytes)) == vector_words


@pytest.mark.parametrize(
    "data, error",
    [
        (b"", SizeTooSmallError),
        (b"\x00", SizeTooSmallError),
        (b"\x00" * 3, OddSizeError),
        (b"\x00" * 23, OddSizeError),
        (b"\x00" * 1025, SizeTooLargeError),
        (b"\x00" * 1026, SizeTooLargeError),
    ],
)
def test_encode_rejects_bad_sizes(data: bytes, error):
    with pytest.raises(error) as exc:
        bytes_to_passphrase(data)

    assert exc.value.size == len(data)
    assert isinstance(exc.value, PassphraseSizeError)
    assert isinstance(exc.value, ValueError)


def test_size_error_messages():
    with pytest.raises(SizeTooLargeError) as too_large:
        bytes_to_passphrase(b"\x00" * 1026)
    with pytest.raises(OddSizeError) as odd:
        bytes_to_passphrase(b"\x00" * 3)

    assert str(too_large.value) == "expected a number between 2 and 1024, got 1026"
    assert str(odd.value) == "expected an even number, got: 3"


def test_size_bounds_are_inclusive():
    assert len(bytes_to_passphrase(b"\x01" * 2)) == 1
    assert len(bytes_to_passphrase(b"\x01" * 1024)) == 512


@pytest.mark.parametrize("data", ["0000", 0, [0, 0]])
def test_encode_rejects_non_bytes(data):
    with pytest.raises(TypeError):
        bytes_to_passphrase(data)


@pytest.mark.parametrize("word", ["ZYZZYVA", "zyzzyva", "Zyzzyva"])
def test_decode_ignores_case(word: str):
    assert passphrase_to_bytes([word]) == b"\xff\xff"


def test_decode_returns_expected_bytes():
    assert passphrase_to_bytes(["A"]) == b"\x00\x00"
    assert passphrase_to_bytes(["legalize", "rich", "couch", "axel"]).hex() == "7a40bcb12c870b52"


def test_decode_reports_unknown_word():
    with pytest.raises(WordNotFoundError) as exc:
        passphrase_to_bytes(["You", "love", "ninetails"])

    assert exc.value.word == "ninetails"
    assert exc.value.position == 2
    assert str(exc.value) == "invalid word entered: ninetails"
    assert isinstance(exc.value, LookupError)


def test_decode_reports_first_unknown_word_only():
    with pytest.raises(WordNotFoundError) as exc:
        passphrase_to_bytes(["bogusone", "a", "bogustwo"])

    assert exc.value.word == "bogusone"
    assert exc.value.position == 0


def test_decode_rejects_overlong_words_without_searching(dictionary: Dictionary, monkeypatch):
    def fail_search(word):
        raise AssertionError("binary search should not run")

    monkeypatch.setattr(dictionary, "index_of", fail_search)
    overlong = "a" * (dictionary.max_word_length + 1)

    with pytest.raises(WordNotFoundError) as exc:
        passphrase_to_bytes([overlong], dictionary)

    assert exc.value.word == overlong


def test_decode_accepts_the_longest_word(dictionary: Dictionary):
    longest = "antidisestablishmentarianism"
    assert len(longest) == dictionary.max_word_length
    assert bytes_to_passphrase(passphrase_to_bytes([longest])) == [longest]


def test_decode_of_empty_sequence_is_empty():
    assert passphrase_to_bytes([]) == b""


def test_decode_rejects_unsplit_string():
    with pytest.raises(TypeError):
        passphrase_to_bytes("legalize rich couch axel")


def test_concurrent_failures_keep_their_own_word():
    bad_words = [f"notaword{i}" for i in range(32)]

    def decode(word):
        try:
            passphrase_to_bytes(["a", word])
        except WordNotFoundError as exc:
            return exc.word
        return None

    with ThreadPoolExecutor(max_workers=8) as pool:
        reported = list(pool.map(decode, bad_words))

    assert reported == bad_words


@pytest.mark.parametrize("size", [2, 4, 64, 512, 1024])
def test_round_trip_from_bytes(size: int):
    data = random.Random(size).randbytes(size)
    assert passphrase_to_bytes(bytes_to_passphrase(data)) == data


def test_round_trip_from_words_uses_canonical_spelling(dictionary: Dictionary):
    rng = random.Random(7)
    words = [dictionary.word_at(rng.randrange(len(dictionary))) for _ in range(512)]
    shouted = [word.upper() for word in words]

    assert bytes_to_passphrase(passphrase_to_bytes(shouted)) == words


def test_passphrase_size_matches_joined_encoding(vector_bytes: bytes):
    expected = " ".join(bytes_to_passphrase(vector_bytes))
    assert passphrase_size(vector_bytes) == len(expected)
    assert passphrase_size(b"\x00\x00") == 1


def test_passphrase_size_validates_like_encoding():
    with pytest.raises(SizeTooSmallError):
        passphrase_size(b"")
    with pytest.raises(OddSizeError):
        passphrase_size(b"\x00" * 3)
    with pytest.raises(SizeTooLargeError):
        passphrase_size(b"\x00" * 2048)


def test_bytes_size_matches_decoding(vector_words: List[str]):
    assert bytes_size(vector_words) == len(passphrase_to_bytes(vector_words))
    assert bytes_size([]) == 0
    with pytest.raises(TypeError):
        bytes_size("zyzzyva")
