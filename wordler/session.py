"""
The solver session: dictionary, constraints and attempt history.

A Session always shows one suggestion (`current`) whose cells the user
colours in. `next()` commits those colours as constraints and moves on to a
new suggestion; `undo()` steps back one row; `not_a_word()` swaps the
current suggestion for another when the game refuses it; `reset()` starts
over.

States:
  NO_ATTEMPTS        nothing committed yet; the first suggestion is shown and
                     the scoring strategy may still be changed
  AWAITING_FEEDBACK  at least one attempt committed, a suggestion is shown
  OUT_OF_CANDIDATES  no dictionary word fits the feedback; undo or reset

The constraint set is always what replaying the history through
`add_filters`, oldest first, would produce. `undo` and `not_a_word` rebuild
it exactly that way.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from wordler.datasets import english_words, english_frequencies
from wordler.engine.constraints import ConstraintSet, filter_candidates
from wordler.engine.errors import StrategyLockedError
from wordler.engine.feedback import Attempt, LetterFeedback
from wordler.engine.frequency import FrequencyTable
from wordler.engine.validation import check_row
from wordler.strategies import ScoringStrategy, create_strategy, get_strategy_ids

log = logging.getLogger(__name__)


class SessionState(Enum):
    NO_ATTEMPTS = "no_attempts"
    AWAITING_FEEDBACK = "awaiting_feedback"
    OUT_OF_CANDIDATES = "out_of_candidates"


def suggest_word(words: Iterable[str], constraints: ConstraintSet,
                 strategy: ScoringStrategy) -> Optional[str]:
    """
    Best-scoring word among those consistent with every constraint.

    Scores are compared as int(score * 1000) so floating point noise can't
    reorder near-equal words; among equal keys the first word in iteration
    order wins. Returns None if nothing survives the filter.
    """
    best_word: Optional[str] = None
    best_key = -1
    for w in words:
        if not constraints.accepts(w):
            continue
        key = int(strategy.score(w) * 1000)
        if best_word is None or key > best_key:
            best_word, best_key = w, key
    return best_word


class Session:
    def __init__(
            self,
            words: Sequence[str],
            frequencies: FrequencyTable | None = None,
            *,
            strategy_id: str | None = None,
    ):
        """
        Args:
          words       : the dictionary; every entry must have the same length.
                        The session keeps its own sorted, uppercase copy.
          frequencies : scoring signal; computed from `words` if omitted.
          strategy_id : registered strategy to start with (default: the first).
        """
        cleaned = sorted({w.strip().upper() for w in words})
        if not cleaned:
            raise ValueError("Session needs a non-empty dictionary")
        lengths = {len(w) for w in cleaned}
        if len(lengths) != 1:
            raise ValueError(f"Dictionary words must share one length, got {sorted(lengths)}")
        self.word_length: int = lengths.pop()

        self._words: List[str] = cleaned
        self.frequencies = frequencies or FrequencyTable.from_words(cleaned)
        self.strategy_ids: List[str] = get_strategy_ids()
        self.strategy: ScoringStrategy = create_strategy(
            strategy_id or self.strategy_ids[0], self.frequencies)

        self.constraints = ConstraintSet()
        self.history: List[Attempt] = []
        self.current: Optional[Attempt] = None
        self.reset()

    @classmethod
    def default(cls, *, strategy_id: str | None = None) -> "Session":
        """A session over the bundled English dictionary."""
        return cls(english_words(), english_frequencies(), strategy_id=strategy_id)

    # ---- read-only views ----

    @property
    def words(self) -> List[str]:
        return list(self._words)

    @property
    def state(self) -> SessionState:
        if self.current is None:
            return SessionState.OUT_OF_CANDIDATES
        if not self.history:
            return SessionState.NO_ATTEMPTS
        return SessionState.AWAITING_FEEDBACK

    @property
    def attempts(self) -> List[Attempt]:
        """History followed by the current suggestion (the rows of the grid)."""
        rows = list(self.history)
        if self.current is not None:
            rows.append(self.current)
        return rows

    def candidates(self) -> List[str]:
        """Every dictionary word still consistent with the constraints."""
        return filter_candidates(self._words, self.constraints)

    # ---- engine operations ----

    def suggest_word(self) -> Optional[str]:
        return suggest_word(self._words, self.constraints, self.strategy)

    def add_filters(self, feedbacks: Iterable[LetterFeedback]) -> List[LetterFeedback]:
        """
        Add feedback to the constraint set, silently skipping anything that
        contradicts what is already known. Returns what was actually added.
        """
        return self.constraints.add_all(feedbacks)

    def set_feedback(self, feedbacks: Iterable[LetterFeedback]) -> None:
        """Colour the whole current row at once (e.g. from typed input)."""
        if self.current is None:
            raise RuntimeError("No current suggestion to give feedback on")
        self.current.set_cells(check_row(feedbacks, self.current.word))

    def cycle(self, position: int) -> LetterFeedback:
        """Advance one cell of the current row to its next colour."""
        if self.current is None:
            raise RuntimeError("No current suggestion to give feedback on")
        return self.current.cycle(position)

    def next(self) -> bool:
        """
        Commit the current row and move to a new suggestion.

        Returns False when no word is left; the row is still committed, so
        `undo()` brings it back for correction.
        """
        if self.current is None:
            return False
        last = self.current
        self.add_filters(last)
        self.history.append(last)

        word = self.suggest_word()
        if word is None:
            log.debug("no candidates left after %d attempt(s)", len(self.history))
            self.current = None
            return False
        self.current = last.next(word)
        return True

    def undo(self) -> bool:
        """
        Drop the current suggestion and reopen the previous attempt for
        editing. No-op (returns False) when nothing has been committed.
        """
        if not self.history:
            return False
        self.current = self.history.pop()
        self._replay()
        return True

    def not_a_word(self) -> bool:
        """
        The game rejected the current suggestion: remove it from this
        session's dictionary for good and suggest something else for the
        same row. No-op (returns False) when there is no suggestion.
        """
        if self.current is None:
            return False
        rejected = self.current.word
        self._replay()
        self._words.remove(rejected)
        log.debug("removed %s from the dictionary (%d words left)", rejected, len(self._words))

        word = self.suggest_word()
        if word is None:
            self.current = None
        elif self.history:
            self.current = self.history[-1].next(word)
        else:
            self.current = Attempt.new(word)
        return True

    def reset(self) -> bool:
        """
        Forget all feedback and history and start again from the initial
        suggestion. Removed words stay removed.
        """
        self.constraints.clear()
        self.history = []
        word = self.suggest_word()
        self.current = Attempt.new(word) if word is not None else None
        return self.current is not None

    def set_strategy(self, strategy_id: str) -> None:
        """
        Switch scoring strategy. Only allowed before any attempt is
        committed, since earlier suggestions came from the old strategy.
        """
        if self.history:
            raise StrategyLockedError("Scoring can only be changed before the first attempt")
        self.strategy = create_strategy(strategy_id, self.frequencies)
        self.reset()

    def _replay(self) -> None:
        self.constraints.clear()
        for attempt in self.history:
            self.add_filters(attempt)

    def __repr__(self) -> str:
        return (f"<Session strategy={self.strategy.id} words={len(self._words)} "
                f"attempts={len(self.history)} state={self.state.value}>")
