# apps/cli/play.py
"""
Interactive prompt loop: play along with a real Wordle game.

Each turn the solver prints every attempt so far (coloured) and the word to
try next. Type the game's response for that word:

    G / g   green  (right letter, right position)
    Y / y   yellow (right letter, wrong position)
    . or -  grey   (letter not in the word)

or one of the commands: undo, nope (the game doesn't know the word),
reset, strategy <id>, quit.

Usage:
    python -m apps.cli.play
    python -m apps.cli.play --strategy mul_unique --words my_words.txt
"""

from __future__ import annotations

import argparse
import logging
import sys

from wordler import Session, SessionState
from wordler.datasets import (DEFAULT_WORD_LENGTH, english_words, english_frequencies,
                              load_words)
from wordler.engine import InvalidFeedbackError, StrategyLockedError, parse_feedback
from wordler.render import ansi
from wordler.strategies import get_strategy_ids

HELP = """
Enter the game response using:
"G" or "g" for a Green letter (you got it in the right position)
"Y" or "y" for a Yellow letter (you got it, but in the wrong position)
"." for a grey letter (you didn't get it)
Commands: undo | nope | reset | strategy <id> | quit"""


def show(session: Session, color: bool) -> None:
    rows = session.attempts
    for i, attempt in enumerate(rows):
        last = i == len(rows) - 1 and session.current is not None
        pad = "Try " if last else "    "
        print(f"{pad}{ansi(attempt, color=color)}")


def handle(session: Session, line: str) -> bool:
    """
    Apply one line of input. Returns False when the loop should stop.
    """
    cmd, _, arg = line.strip().partition(" ")
    cmd = cmd.lower()

    if cmd in ("quit", "exit", "q"):
        return False
    if cmd == "undo":
        if not session.undo():
            print("Nothing to undo")
        return True
    if cmd == "nope":
        session.not_a_word()
    elif cmd == "reset":
        session.reset()
    elif cmd == "strategy":
        try:
            session.set_strategy(arg.strip())
            print(f"Scoring: {session.strategy.name}")
        except (StrategyLockedError, ValueError) as e:
            print(e)
        return True
    elif session.current is None:
        print("No suggestion to answer; type undo or reset")
        return True
    else:
        try:
            session.set_feedback(parse_feedback(line, session.current.word))
        except InvalidFeedbackError as e:
            print(f"Invalid response: {e}")
            return True
        session.next()

    if session.state is SessionState.OUT_OF_CANDIDATES:
        print("I'm out of ideas (undo fixes the last response, reset starts over)")
    return True


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="wordler - suggest Wordle guesses from feedback")
    ap.add_argument("--strategy", default=None,
                    help=f"scoring strategy (one of: {', '.join(get_strategy_ids())})")
    ap.add_argument("--words", default=None,
                    help="path to a word list (default: bundled English list)")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length of --words")
    ap.add_argument("--no-color", action="store_true", help="plain text output")
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.words:
            session = Session(load_words(args.words, args.N), strategy_id=args.strategy)
        else:
            session = Session(english_words(), english_frequencies(), strategy_id=args.strategy)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if session.state is SessionState.OUT_OF_CANDIDATES:
        print("I'm out of ideas")
        return 1

    color = not args.no_color and sys.stdout.isatty()
    print(f"Scoring: {session.strategy.name}")
    while True:
        show(session, color)
        print(HELP)
        try:
            line = input("Response: ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            return 0
        if not handle(session, line):
            return 0


if __name__ == "__main__":
    sys.exit(main())
