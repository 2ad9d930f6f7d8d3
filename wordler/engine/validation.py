"""
Input validation: turning what a user typed into engine feedback.

A response has one symbol per letter of the current suggestion:
    'G' / 'g'  correct (green)
    'Y' / 'y'  present (yellow)
    '.' / '-'  absent  (grey)
Anything else, or a response of the wrong length, raises
InvalidFeedbackError so the prompt loop can ask again. The '-' form is
also what wordler.engine.scoring.score produces, so harness patterns go
through the same path.
"""

from __future__ import annotations

from typing import Iterable, List

from .errors import InvalidFeedbackError
from .feedback import LetterFeedback

ABSENT_SYMBOLS = ".-"


def parse_feedback(response: str, word: str) -> List[LetterFeedback]:
    """
    Map `response` onto `word`, one LetterFeedback per position.

    Raises:
      InvalidFeedbackError if the lengths differ or a symbol is unknown.
    """
    response = response.strip().upper()
    word = word.upper()
    if len(response) != len(word):
        raise InvalidFeedbackError(
            f"Expected {len(word)} symbols for {word}, got {len(response)}: {response!r}")

    out: List[LetterFeedback] = []
    for position, (code, letter) in enumerate(zip(response, word)):
        if code == "G":
            out.append(LetterFeedback.correct(letter, position))
        elif code == "Y":
            out.append(LetterFeedback.present(letter, position))
        elif code in ABSENT_SYMBOLS:
            out.append(LetterFeedback.absent(letter))
        else:
            raise InvalidFeedbackError(f"Unknown symbol {code!r} at position {position + 1}")
    return out


def check_row(feedbacks: Iterable[LetterFeedback], word: str) -> List[LetterFeedback]:
    """
    Make sure a full feedback row really describes `word`: right length, and
    each cell carries the letter of its position (and, for CORRECT/PRESENT,
    the position itself).
    """
    row = list(feedbacks)
    if len(row) != len(word):
        raise InvalidFeedbackError(f"Expected {len(word)} cells for {word}, got {len(row)}")
    for i, (cell, letter) in enumerate(zip(row, word)):
        if cell.letter != letter:
            raise InvalidFeedbackError(f"Cell {i + 1} is for {cell.letter}, word has {letter}")
        if cell.is_positive and cell.position != i:
            raise InvalidFeedbackError(f"Cell {i + 1} points at position {cell.position + 1}")
    return row

