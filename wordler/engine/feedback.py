"""
Per-letter feedback and the grid rows built from it.

Conventions:
  - CORRECT : green  = letter sits at exactly this position
  - PRESENT : yellow = letter occurs in the word, but not at this position
  - ABSENT  : grey   = letter does not occur anywhere in the word

A LetterFeedback is both a cell of the grid (what the user marked) and a
filter over candidate words (what the engine keeps). Values are frozen and
totally ordered by (kind, letter, position), so identical feedback collapses
to a single entry in a set.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional


class FeedbackKind(IntEnum):
    CORRECT = 0
    PRESENT = 1
    ABSENT = 2


# Pattern characters used by the text adapter and by Attempt.pattern
SYMBOLS = {
    FeedbackKind.CORRECT: "G",
    FeedbackKind.PRESENT: "Y",
    FeedbackKind.ABSENT: ".",
}


@dataclass(frozen=True, order=True)
class LetterFeedback:
    kind: FeedbackKind
    letter: str
    position: Optional[int] = None  # always None for ABSENT

    @classmethod
    def correct(cls, letter: str, position: int) -> "LetterFeedback":
        return cls(FeedbackKind.CORRECT, letter.upper(), position)

    @classmethod
    def present(cls, letter: str, position: int) -> "LetterFeedback":
        return cls(FeedbackKind.PRESENT, letter.upper(), position)

    @classmethod
    def absent(cls, letter: str) -> "LetterFeedback":
        return cls(FeedbackKind.ABSENT, letter.upper())

    @property
    def is_positive(self) -> bool:
        """True for feedback that says the letter is in the word."""
        return self.kind is not FeedbackKind.ABSENT

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.kind]

    def accept(self, word: str) -> bool:
        """
        Is `word` consistent with this piece of feedback?

        `word` must already have the session's fixed length; an out-of-range
        position raises IndexError.
        """
        if self.kind is FeedbackKind.CORRECT:
            return word[self.position] == self.letter
        if self.kind is FeedbackKind.PRESENT:
            return word[self.position] != self.letter and self.letter in word
        return self.letter not in word

    def cycle(self, position: int) -> "LetterFeedback":
        """
        Next colour for a grid cell: ABSENT -> PRESENT -> CORRECT -> ABSENT.
        """
        if self.kind is FeedbackKind.ABSENT:
            return LetterFeedback.present(self.letter, position)
        if self.kind is FeedbackKind.PRESENT:
            return LetterFeedback.correct(self.letter, position)
        return LetterFeedback.absent(self.letter)

    def __repr__(self) -> str:
        if self.kind is FeedbackKind.ABSENT:
            return f"Absent({self.letter})"
        label = "Correct" if self.kind is FeedbackKind.CORRECT else "Present"
        return f"{label}({self.letter}, {self.position})"


class Attempt:
    """
    One suggested word plus the feedback the user has given it so far.

    Cells start out ABSENT (grey) and are edited in place, either one at a
    time with `cycle` or as a whole row with `set_cells`.
    """

    def __init__(self, cells: List[LetterFeedback]):
        self.cells = list(cells)

    @classmethod
    def new(cls, word: str) -> "Attempt":
        return cls([LetterFeedback.absent(ch) for ch in word.upper()])

    def next(self, word: str) -> "Attempt":
        """
        Start the row for `word`, pinning every CORRECT cell of this attempt
        at the same position so the user doesn't have to mark it again.
        """
        nxt = Attempt.new(word)
        for i, cell in enumerate(self.cells):
            if cell.kind is FeedbackKind.CORRECT and i < len(nxt.cells):
                nxt.cells[i] = cell
        return nxt

    @property
    def word(self) -> str:
        return "".join(c.letter for c in self.cells)

    @property
    def pattern(self) -> str:
        return "".join(c.symbol for c in self.cells)

    def cycle(self, position: int) -> LetterFeedback:
        self.cells[position] = self.cells[position].cycle(position)
        return self.cells[position]

    def set_cells(self, cells: List[LetterFeedback]) -> None:
        self.cells = list(cells)

    def __iter__(self) -> Iterator[LetterFeedback]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Attempt):
            return NotImplemented
        return self.cells == other.cells

    def __str__(self) -> str:
        return self.word

    def __repr__(self) -> str:
        return f"Attempt({self.word!r}, {self.pattern!r})"
