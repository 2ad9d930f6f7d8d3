"""
Wordle feedback for a (guess, answer) pair.

The interactive solver never knows the answer; this is only used when the
solver plays against itself (see wordler.harness) and by tests.

Pattern characters:
  - 'G' : correct letter in the correct position
  - 'Y' : correct letter in the wrong position
  - '-' : letter not present (or present fewer times than guessed)

Two passes, the canonical Wordle rule for duplicates:
  1) mark greens and count the answer letters left unmatched;
  2) mark yellows left to right while unmatched copies remain.
"""

from collections import Counter
from typing import Literal

PatternChar = Literal["G", "Y", "-"]


def score(guess: str, answer: str) -> str:
    """
    Compute the feedback pattern for `guess` against `answer`.

    Examples:
      score("BELLE", "LEVEL") -> "-GYYY"
      score("LEMON", "LEVEL") -> "GG---"
    """
    guess = guess.strip().upper()
    answer = answer.strip().upper()
    assert len(guess) == len(answer), "Guess and answer must be the same length"

    pattern = ["-"] * len(guess)

    remaining = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            remaining[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if remaining[g] > 0:
            pattern[i] = "Y"
            remaining[g] -= 1

    return "".join(pattern)
