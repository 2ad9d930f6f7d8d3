"""
The accumulated set of feedback constraints, and candidate filtering.

Given:
  - a pool of words (the session dictionary)
  - the feedback gathered so far, as a ConstraintSet

Return:
  - the words consistent with ALL of it.

The set never holds a positive (CORRECT/PRESENT) and an ABSENT for the same
letter: whichever arrives second is dropped. This is what lets a row like
PROMO with feedback "GGG.." keep the pinned O at position 2 while ignoring the
grey duplicate O at position 4.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Set

from .feedback import LetterFeedback

log = logging.getLogger(__name__)


class ConstraintSet:
    def __init__(self, feedbacks: Iterable[LetterFeedback] = ()):
        self._items: Set[LetterFeedback] = set()
        self.add_all(feedbacks)

    def is_compatible(self, new: LetterFeedback) -> bool:
        """
        False if `new` contradicts something already stored: an ABSENT for a
        letter we know is in the word, or the other way around.
        """
        for cur in self._items:
            if cur.letter != new.letter:
                continue
            if cur.is_positive != new.is_positive:
                return False
        return True

    def add(self, feedback: LetterFeedback) -> bool:
        """
        Insert one constraint. Returns True only if the set changed.
        """
        if feedback in self._items:
            return False
        if not self.is_compatible(feedback):
            log.debug("rejected contradicting feedback %r", feedback)
            return False
        self._items.add(feedback)
        return True

    def add_all(self, feedbacks: Iterable[LetterFeedback]) -> List[LetterFeedback]:
        """
        Insert a batch (usually one attempt's row), positives first so that a
        grey duplicate never shadows a green or yellow of the same letter.

        Returns the constraints that were actually added.
        """
        ordered = sorted(feedbacks, key=lambda f: not f.is_positive)
        return [f for f in ordered if self.add(f)]

    def accepts(self, word: str) -> bool:
        return all(f.accept(word) for f in self._items)

    def clear(self) -> None:
        self._items.clear()

    def copy(self) -> "ConstraintSet":
        return ConstraintSet(self._items)

    def __contains__(self, feedback: object) -> bool:
        return feedback in self._items

    def __iter__(self) -> Iterator[LetterFeedback]:
        return iter(sorted(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintSet):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"ConstraintSet({sorted(self._items)!r})"


def filter_candidates(words: Iterable[str], constraints: ConstraintSet) -> List[str]:
    """
    Keep only the words satisfying every constraint (order preserved as in
    `words`).
    """
    return [w for w in words if constraints.accepts(w)]
