import csv
import json

import pytest
from wordler.harness import run_case, run_batch, summarize, write_results, write_manifest

WORDS = ["CRANE", "CRATE", "TRACE", "SLATE", "PLUMB", "GRATE"]


def test_run_case_smoke():
    r = run_case("trace", words=WORDS)
    assert "success" in r and "history" in r
    assert r["success"] is True
    assert r["answer"] == "TRACE"
    assert r["history"][-1] == ("TRACE", "GGGGG")
    assert r["strategy_id"] == "sum_unique"


def test_run_case_rejects_other_turn_budgets():
    with pytest.raises(ValueError):
        run_case("CRANE", words=WORDS, max_turns=10)


@pytest.mark.parametrize("strategy_id", ["sum_unique", "mul_unique"])
def test_run_batch_solves_every_word(strategy_id):
    results = run_batch(WORDS, words=WORDS, strategy_id=strategy_id)
    assert len(results) == len(WORDS)
    assert all(r["success"] for r in results)
    assert all(r["guesses"] <= 6 for r in results)


def test_run_batch_sample_and_outputs(tmp_path):
    results = run_batch(WORDS, words=WORDS, sample=2)
    assert [r["answer"] for r in results] == WORDS[:2]

    csv_path = write_results(results, tmp_path / "out" / "run.csv", max_turns=6)
    lines = csv_path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("strategy,answer,solved,guesses,dictionary_size,time_ms,guess_1,pattern_1")
    assert len(lines) == 3
    rows = list(csv.DictReader(lines))
    assert rows[0]["strategy"] == "sum_unique"
    assert rows[0]["answer"] == "CRANE"
    assert rows[0]["solved"] == "1"
    assert rows[0]["dictionary_size"] == "6"
    assert rows[0]["pattern_1"].startswith("'")  # spreadsheet-safe
    assert rows[0]["guess_6"] == ""

    summary = summarize(results)
    m_path = write_manifest(tmp_path / "m.json", config={"sample": 2},
                            wordlist={"count": 6}, summary=summary)
    manifest = json.loads(m_path.read_text(encoding="utf-8"))
    assert manifest["summary"]["games"] == 2
    assert manifest["summary"]["solved"] == 2
    assert manifest["config"] == {"sample": 2}


def test_summarize_counts_guesses_and_misses():
    results = [
        {"answer": "CRANE", "success": True, "guesses": 2},
        {"answer": "CRATE", "success": True, "guesses": 4},
        {"answer": "ZZZZZ", "success": False, "guesses": 6},
    ]
    s = summarize(results)
    assert s["games"] == 3
    assert s["solved"] == 2
    assert s["mean_guesses"] == pytest.approx(3.0)
    assert s["histogram"] == {1: 0, 2: 1, 3: 0, 4: 1, 5: 0, 6: 0}
    assert s["missed"] == ["ZZZZZ"]
    assert summarize([])["mean_guesses"] == 0.0


def test_run_case_reports_dictionary_size():
    r = run_case("GRATE", words=WORDS)
    assert r["dictionary_size"] == len(WORDS)
