"""
Product of unique letter frequencies.

Each distinct letter multiplies the score by (1 + frequency / 100), starting
from 1.0. Compared with the additive variant this rewards covering many
common letters more steeply, and the result is never below 1.0.
"""

from __future__ import annotations
from .base import ScoringStrategy, register


@register
class MulUnique(ScoringStrategy):
    id = "mul_unique"
    name = "Product of unique letter frequencies"

    def score(self, word: str) -> float:
        s = 1.0
        for ch in set(word):
            s *= self.frequencies.of(ch) / 100.0 + 1.0
        return s
