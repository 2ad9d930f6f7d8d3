"""
Dictionary loading.

The solver works over one fixed-length list of uppercase A..Z words. The
default list ships inside the package (data/words_5.txt) and is read once
per process; sessions receive it (and its frequency table) rather than
re-reading it.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Tuple

from wordler.engine.frequency import FrequencyTable
from .io import read_lines

log = logging.getLogger(__name__)

DEFAULT_WORD_LENGTH = 5
DEFAULT_WORDS_PATH = Path(__file__).resolve().parent / "data" / "words_5.txt"


def _is_word(w: str, N: int) -> bool:
    return len(w) == N and w.isascii() and w.isalpha()


def load_words(path: Path | str, N: int = DEFAULT_WORD_LENGTH) -> List[str]:
    """
    Load a newline-separated word list.

    Cleaning: strip, uppercase, drop blanks and anything that isn't exactly
    N letters A..Z, dedupe, sort.

    Raises:
      FileNotFoundError if the file doesn't exist
      ValueError if nothing valid is left
    """
    lines = read_lines(path)
    words = set()
    skipped = 0
    for raw in lines:
        w = raw.strip().upper()
        if not w:
            continue
        if _is_word(w, N):
            words.add(w)
        else:
            skipped += 1

    if skipped:
        log.debug("skipped %d line(s) in %s that are not %d-letter words", skipped, path, N)
    if not words:
        raise ValueError(f"No valid {N}-letter words found in {path}")
    return sorted(words)


@lru_cache(maxsize=None)
def english_words() -> Tuple[str, ...]:
    """The bundled five-letter dictionary, loaded once."""
    return tuple(load_words(DEFAULT_WORDS_PATH, DEFAULT_WORD_LENGTH))


@lru_cache(maxsize=None)
def english_frequencies() -> FrequencyTable:
    """Letter frequencies of the bundled dictionary, computed once."""
    return FrequencyTable.from_words(english_words())
