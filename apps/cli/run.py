# apps/cli/run.py
"""
CLI entry point for self-play evaluation of a scoring strategy.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads it and picks the answers to play (all, or a seeded sample).
  3) Lets a Session solve each answer with a live progress indicator and writes:
       - CSV:  per-game results, dictionary size and guess/pattern columns
       - JSON: manifest with config, word-list report and the batch summary
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from tqdm import tqdm

from wordler.datasets import (DEFAULT_WORD_LENGTH, DEFAULT_WORDS_PATH, load_words,
                              validate_wordlist, pretty_summary)
from wordler.engine import FrequencyTable
from wordler.harness import (run_case, summarize, run_id, write_results, write_manifest,
                             WORDLE_MAX_TURNS)
from wordler.strategies import DEFAULT_STRATEGY, get_strategy_ids


def main(argv: list[str] | None = None) -> int:
    """
    Parse CLI args, validate the word list, run the batch with progress, and
    write outputs.
    """
    strategy_choices = ", ".join(get_strategy_ids())

    ap = argparse.ArgumentParser(description="wordler - self-play strategy evaluation")
    ap.add_argument("--strategy", default=DEFAULT_STRATEGY,
                    help=f"strategy id (one of: {strategy_choices})")
    ap.add_argument("--N", type=int, default=DEFAULT_WORD_LENGTH, help="word length")
    ap.add_argument("--words", default=str(DEFAULT_WORDS_PATH),
                    help="path to the dictionary (also the answer pool)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show run progress (auto=bar on a terminal, else plain text)."
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    if args.strategy not in get_strategy_ids():
        ap.error(f"unknown strategy {args.strategy!r} (one of: {strategy_choices})")

    # 1) Validate and summarize the word list
    rep = validate_wordlist(args.N, args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load words; the frequency table is shared by every game
    words = load_words(args.words, args.N)
    frequencies = FrequencyTable.from_words(words)

    rng = random.Random(args.seed)
    if args.sample and args.sample < len(words):
        cases = rng.sample(words, args.sample)
    else:
        cases = list(words)
    total = len(cases)

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    results = []
    start = time.time()
    last_print = 0.0

    iterator = tqdm(cases, ncols=80, desc="Solving", unit="game",
                    disable=(mode != "bar"))

    # 3) Run the batch
    for idx, ans in enumerate(iterator, 1):
        r = run_case(ans, words=words, strategy_id=args.strategy, frequencies=frequencies)
        results.append(r)

        if mode == "plain":
            now = time.time()
            if (now - last_print >= 1.0) or (idx == total):
                elapsed = now - start
                rate = (idx / elapsed) if elapsed > 0 else 0.0
                remaining = (total - idx) / rate if rate > 0 else 0.0
                pct = 100.0 * idx / max(1, total)
                sys.stderr.write(
                    f"\r[{idx}/{total}] {pct:5.1f}% | elapsed {elapsed:6.1f}s | ETA {remaining:5.1f}s"
                )
                sys.stderr.flush()
                last_print = now

    if mode == "plain":
        sys.stderr.write("\n")
        sys.stderr.flush()

    summary = summarize(results)
    print(f"Solved {summary['solved']}/{summary['games']} | "
          f"mean guesses (solved) {summary['mean_guesses']:.3f}")

    # 4) Write outputs (CSV + manifest)
    rid = run_id()
    outdir = Path(args.outdir)
    csv_path = write_results(results, outdir / f"run_{rid}.csv", max_turns=WORDLE_MAX_TURNS)
    manifest_path = write_manifest(outdir / f"run_{rid}_manifest.json",
                                   config=vars(args), wordlist=rep, summary=summary)

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
