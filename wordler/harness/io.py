"""
Output files for self-play runs.

A run writes two files side by side:
  run_<id>.csv            one row per game (see RESULT_FIELDS), then the
                          guess and pattern of every turn played
  run_<id>_manifest.json  run settings, the word-list report and the summary
                          from wordler.harness.core.summarize
"""

from __future__ import annotations

import csv
import json
import time
from pathlib import Path
from typing import Dict, List, Sequence

RESULT_FIELDS = ["strategy", "answer", "solved", "guesses", "dictionary_size", "time_ms"]


def run_id() -> str:
    """UTC timestamp used to name a run's files, e.g. 20250820T024121Z."""
    return time.strftime("%Y%m%dT%H%M%SZ", time.gmtime())


def turn_fields(max_turns: int) -> List[str]:
    fields: List[str] = []
    for turn in range(1, max_turns + 1):
        fields += [f"guess_{turn}", f"pattern_{turn}"]
    return fields


def write_results(results: Sequence[Dict], path: str | Path, *, max_turns: int) -> Path:
    """
    One CSV row per game. Turns not played are left empty; patterns get a
    leading apostrophe so spreadsheets keep "-GYY-" as text.
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=RESULT_FIELDS + turn_fields(max_turns), restval="")
        w.writeheader()
        for r in results:
            row = {
                "strategy": r["strategy_id"],
                "answer": r["answer"],
                "solved": int(r["success"]),
                "guesses": r["guesses"],
                "dictionary_size": r["dictionary_size"],
                "time_ms": f"{r['time_ms']:.3f}",
            }
            for turn, (guess, patt) in enumerate(r["history"][:max_turns], 1):
                row[f"guess_{turn}"] = guess
                row[f"pattern_{turn}"] = "'" + patt
            w.writerow(row)
    return p


def write_manifest(path: str | Path, *, config: Dict, wordlist: Dict, summary: Dict) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    manifest = {"config": config, "wordlist": wordlist, "summary": summary}
    p.write_text(json.dumps(manifest, indent=2, default=str) + "\n", encoding="utf-8")
    return p
