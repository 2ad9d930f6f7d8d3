"""
Self-play harness: let a Session solve puzzles with a known answer.

- run_case:  play one hidden answer until solved or the turn budget runs out.
- run_batch: play many answers back-to-back.
- summarize: solved count, mean guesses and guess histogram of a batch.

The session is driven exactly as a user would drive it: the harness reads
the current suggestion, computes the game's pattern with engine.score,
types it in through parse_feedback and calls next(). Nothing here is needed
for interactive use; it exists to compare scoring strategies.
"""

from __future__ import annotations
import time
from typing import Dict, List, Iterable, Sequence, Tuple

from wordler.engine import score, parse_feedback, FrequencyTable
from wordler.session import Session

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with >6 turns."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        answer: str,
        *,
        words: Sequence[str],
        strategy_id: str | None = None,
        frequencies: FrequencyTable | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
) -> Dict:
    """
    Play one game against `answer`.

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float), answer (str),
            strategy_id (str), dictionary_size (int),
            history (list[(guess, pattern)])
    """
    _assert_wordle_turns(max_turns)
    answer = answer.strip().upper()

    t0 = time.perf_counter()
    session = Session(words, frequencies, strategy_id=strategy_id)
    history: List[Tuple[str, str]] = []
    success = False

    for _ in range(max_turns):
        if session.current is None:
            break  # dictionary exhausted; only possible if answer isn't in it
        guess = session.current.word
        patt = score(guess, answer)
        history.append((guess, patt))

        if guess == answer:
            success = True
            break

        session.set_feedback(parse_feedback(patt, guess))
        session.next()

    return {
        "success": success,
        "guesses": len(history),
        "time_ms": (time.perf_counter() - t0) * 1000.0,
        "history": history,
        "answer": answer,
        "strategy_id": session.strategy.id,
        "dictionary_size": len(session.words),
    }


def run_batch(
        answers: Iterable[str],
        *,
        words: Sequence[str],
        strategy_id: str | None = None,
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
) -> List[Dict]:
    """
    Run many cases. If `sample` is given only the first K answers are played.
    The frequency table is computed once and shared by every case.
    """
    _assert_wordle_turns(max_turns)
    pool = list(answers)
    if sample is not None:
        pool = pool[:sample]

    frequencies = FrequencyTable.from_words(words)
    return [
        run_case(ans, words=words, strategy_id=strategy_id,
                 frequencies=frequencies, max_turns=max_turns)
        for ans in pool
    ]


def summarize(results: Sequence[Dict], max_turns: int = WORDLE_MAX_TURNS) -> Dict:
    """
    Aggregate a batch: games played, how many were solved, mean guesses over
    the solved ones, how many games took each number of guesses, and the
    answers that were missed.
    """
    solved = [r for r in results if r["success"]]
    histogram = {turn: 0 for turn in range(1, max_turns + 1)}
    for r in solved:
        histogram[r["guesses"]] += 1
    return {
        "games": len(results),
        "solved": len(solved),
        "mean_guesses": sum(r["guesses"] for r in solved) / len(solved) if solved else 0.0,
        "histogram": histogram,
        "missed": [r["answer"] for r in results if not r["success"]],
    }
