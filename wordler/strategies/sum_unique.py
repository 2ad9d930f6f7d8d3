"""
Sum of unique letter frequencies.

Score a word as the sum of the frequencies of its DISTINCT letters, so a
repeated letter is only paid for once (prefer 'SLATE' over 'SLEET' when the
letters are similarly common).
"""

from __future__ import annotations
from .base import ScoringStrategy, register


@register
class SumUnique(ScoringStrategy):
    id = "sum_unique"
    name = "Sum of unique letter frequencies"

    def score(self, word: str) -> float:
        seen = set()
        s = 0.0
        for ch in word:
            if ch not in seen:
                s += self.frequencies.of(ch)
                seen.add(ch)
        return s
