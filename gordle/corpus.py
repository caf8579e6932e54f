"""Loading word lists and picking a word from them."""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path


class CorpusError(Exception):
    """A corpus could not be used."""


class CorpusIsEmptyError(CorpusError):
    """The corpus holds no data."""

    def __init__(self, message: str = "corpus is empty") -> None:
        super().__init__(message)


def read_corpus(path: str | Path) -> list[str]:
    """Read a whitespace-separated list of words from the file at ``path``."""
    try:
        data = Path(path).read_bytes()
    except OSError as err:
        raise CorpusError(f"unable to open {str(path)!r} for reading: {err}") from err

    if not data:
        raise CorpusIsEmptyError()

    return data.decode("utf-8", errors="replace").split()


def pick_word(corpus: Sequence[str]) -> str:
    """Return a random word from the corpus."""
    if not corpus:
        raise CorpusIsEmptyError()
    return random.choice(corpus)