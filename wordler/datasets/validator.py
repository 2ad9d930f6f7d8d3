"""
Word-list validator.

What this module does:
- Check a dictionary file against the format the solver expects: one word
  per line, letters A..Z only, exact length N (case is normalized on load,
  so lowercase lines are accepted).
- Count invalid lines and duplicates; compute SHA-256 of the raw file.
- Return a machine-readable dict (for run manifests) and a one-line summary.

Typical use:
    from wordler.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordler/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class ValidationReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # valid lines
    unique_count: int    # distinct valid words
    invalid_lines: int   # blank, non-alphabetic, or wrong length
    sha256: str          # of the raw bytes ("" if missing)
    passed: bool
    issues: List[str]


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip().upper()
            if len(w) == N and w.isascii() and w.isalpha():
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate the dictionary at `path` for word length N.

    Returns a JSON-serializable dict (see ValidationReport). `passed` is
    strict: the file exists, holds at least one word, and has no invalid
    lines or duplicates.
    """
    issues: List[str] = []
    p = Path(path)

    if not p.exists():
        issues.append(f"word list not found: {path}")
        return asdict(ValidationReport(N, str(path), False, 0, 0, 0, "", False, issues))

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = ValidationReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console, e.g.
        N=5 | words=1204 (uniq=1204, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
