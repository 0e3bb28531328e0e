"""
Pytest fixtures for nicephrase tests
"""

import os
import pytest
from pathlib import Path
from typing import AsyncGenerator, Callable, List

# Set test environment before imports
os.environ.setdefault("NICEPHRASE_LOG_LEVEL", "INFO")
os.environ.setdefault("NICEPHRASE_DEFAULT_GENERATE_SIZE", "8")

from httpx import AsyncClient, ASGITransport
from nicephrase.main import app
from nicephrase.wordlist import Dictionary, load_dictionary


@pytest.fixture(scope="session")
def dictionary() -> Dictionary:
    """The canonical niceware table."""
    return load_dictionary()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for testing endpoints."""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac


@pytest.fixture
def vector_bytes() -> bytes:
    """Known byte vector spanning the first and last dictionary words."""
    return bytes([
        0x00, 0x00, 0x11, 0xd4, 0x0c, 0x8c, 0x5a, 0xf7,
        0x2e, 0x53, 0xfe, 0x3c, 0x36, 0xa9, 0xff, 0xff,
    ])


@pytest.fixture
def vector_words() -> List[str]:
    """Passphrase for vector_bytes."""
    return [
        "a", "bioengineering", "balloted", "gobbledegook",
        "creneled", "written", "depriving", "zyzzyva",
    ]


@pytest.fixture
def write_word_file(tmp_path: Path, dictionary: Dictionary) -> Callable[..., Path]:
    """Write a word table file, optionally with entries replaced by index."""

    def _write(replace=None, name: str = "words.txt") -> Path:
        words = list(dictionary)
        for index, word in (replace or {}).items():
            words[index] = word
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return path

    return _write
