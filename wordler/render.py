"""
Colours for feedback cells.

Stateless helpers shared by the terminal prompt loop and the tkinter grid:
each cell is drawn according to its FeedbackKind only.
"""

from __future__ import annotations

from typing import Iterable

from wordler.engine.feedback import FeedbackKind, LetterFeedback

# Raw ESC sequences confuse editors; spell them as \033
RESET = "\033[0m"
ANSI = {
    FeedbackKind.CORRECT: "\033[1;92;40m",   # bright green on black
    FeedbackKind.PRESENT: "\033[1;93;40m",   # bright yellow on black
    FeedbackKind.ABSENT: "\033[37;100m",     # white on grey
}

CELL_COLORS = {
    FeedbackKind.CORRECT: "#6aaa64",
    FeedbackKind.PRESENT: "#c9b458",
    FeedbackKind.ABSENT: "#787c7e",
}


def cell_color(cell: LetterFeedback) -> str:
    return CELL_COLORS[cell.kind]


def ansi(cells: Iterable[LetterFeedback], color: bool = True) -> str:
    """
    One row for the terminal. Without colour, fall back to "WORD  G.Y..".
    """
    cells = list(cells)
    if not color:
        word = "".join(c.letter for c in cells)
        return f"{word}  {''.join(c.symbol for c in cells)}"
    return "".join(f"{ANSI[c.kind]}{c.letter}{RESET}" for c in cells)
