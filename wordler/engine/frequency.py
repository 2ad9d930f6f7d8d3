"""
Letter frequency table: the scoring signal for every strategy.

A FrequencyTable maps each letter A..Z to its share (in percent) of all
letter occurrences. Repeated letters inside a word count every time, so the
26 values sum to 100 for any non-empty dictionary.

Two ways to build one:
  - FrequencyTable.from_words(words): counted over a dictionary (what a
    session uses by default).
  - FrequencyTable.standard(): the fixed English table below, handy when the
    score of a word must not depend on the word list.
"""

from __future__ import annotations

import string
from collections.abc import Mapping
from typing import Dict, Iterable, Iterator

import numpy as np

LETTERS = string.ascii_uppercase

# Percentages for English text.
STANDARD_ENGLISH: Dict[str, float] = {
    "A": 8.34, "B": 1.54, "C": 2.73, "D": 4.14, "E": 12.60, "F": 2.03,
    "G": 1.92, "H": 6.11, "I": 6.71, "J": 0.23, "K": 0.87, "L": 4.24,
    "M": 2.53, "N": 6.80, "O": 7.70, "P": 1.66, "Q": 0.09, "R": 5.68,
    "S": 6.11, "T": 9.37, "U": 2.85, "V": 1.06, "W": 2.34, "X": 0.20,
    "Y": 2.04, "Z": 0.06,
}


class FrequencyTable(Mapping):
    """Read-only letter -> percentage mapping over the 26 uppercase letters."""

    def __init__(self, percentages: Mapping[str, float]):
        table = {ch: 0.0 for ch in LETTERS}
        for letter, pct in percentages.items():
            key = letter.upper()
            if key not in table:
                raise ValueError(f"Not a letter A-Z: {letter!r}")
            table[key] = float(pct)
        self._table = table

    @classmethod
    def from_words(cls, words: Iterable[str]) -> "FrequencyTable":
        """
        Count every letter occurrence across `words` and normalize to 100.
        Characters outside A..Z are ignored.
        """
        blob = "".join(words).upper().encode("ascii", errors="ignore")
        codes = np.frombuffer(blob, dtype=np.uint8).astype(np.int64) - ord("A")
        codes = codes[(codes >= 0) & (codes < 26)]
        counts = np.bincount(codes, minlength=26)
        total = counts.sum()
        if total == 0:
            raise ValueError("Cannot build a frequency table from an empty word list")
        pcts = counts * 100.0 / total
        return cls({ch: float(p) for ch, p in zip(LETTERS, pcts)})

    @classmethod
    def standard(cls) -> "FrequencyTable":
        return cls(STANDARD_ENGLISH)

    def of(self, letter: str) -> float:
        return self._table[letter.upper()]

    def __getitem__(self, letter: str) -> float:
        return self.of(letter)

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __repr__(self) -> str:
        top = sorted(self._table.items(), key=lambda kv: -kv[1])[:5]
        shown = ", ".join(f"{k}={v:.2f}" for k, v in top)
        return f"FrequencyTable({shown}, ...)"
