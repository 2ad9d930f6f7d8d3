import itertools

import pytest
from wordler.engine import Attempt, FeedbackKind, LetterFeedback

WORDS = ["BAB", "BBB", "ABA", "AAB", "CAB"]


def test_filter_truth_table():
    assert not LetterFeedback.absent("A").accept("BAB")
    assert LetterFeedback.absent("A").accept("BBB")

    assert LetterFeedback.correct("A", 1).accept("BAB")
    assert not LetterFeedback.correct("A", 0).accept("BAB")

    assert LetterFeedback.present("A", 0).accept("BAB")
    assert not LetterFeedback.present("A", 1).accept("BAB")
    assert not LetterFeedback.present("A", 1).accept("BBB")


@pytest.mark.parametrize("word,letter,pos", itertools.product(WORDS, "ABC", range(3)))
def test_accept_matches_definition(word, letter, pos):
    assert LetterFeedback.correct(letter, pos).accept(word) == (word[pos] == letter)
    assert LetterFeedback.present(letter, pos).accept(word) == (
        word[pos] != letter and letter in word)
    assert LetterFeedback.absent(letter).accept(word) == (letter not in word)


def test_out_of_range_position_is_a_contract_violation():
    with pytest.raises(IndexError):
        LetterFeedback.correct("A", 7).accept("BAB")


def test_identical_feedback_collapses_in_a_set():
    s = {LetterFeedback.correct("a", 1), LetterFeedback.correct("A", 1),
         LetterFeedback.absent("Z"), LetterFeedback.absent("Z")}
    assert len(s) == 2


def test_feedback_is_totally_ordered():
    items = [LetterFeedback.absent("B"), LetterFeedback.present("A", 2),
             LetterFeedback.correct("C", 0), LetterFeedback.absent("A"),
             LetterFeedback.correct("C", 1)]
    assert [f.kind for f in sorted(items)] == [
        FeedbackKind.CORRECT, FeedbackKind.CORRECT, FeedbackKind.PRESENT,
        FeedbackKind.ABSENT, FeedbackKind.ABSENT]
    assert sorted(items)[3] == LetterFeedback.absent("A")


def test_cycle_goes_grey_yellow_green_grey():
    cell = LetterFeedback.absent("Q")
    cell = cell.cycle(3)
    assert cell == LetterFeedback.present("Q", 3)
    cell = cell.cycle(3)
    assert cell == LetterFeedback.correct("Q", 3)
    assert cell.cycle(3) == LetterFeedback.absent("Q")


def test_new_attempt_starts_grey():
    a = Attempt.new("slate")
    assert a.word == "SLATE"
    assert a.pattern == "....."
    assert all(c.kind is FeedbackKind.ABSENT for c in a)


def test_next_attempt_pins_correct_cells():
    a = Attempt.new("SLATE")
    a.cycle(2)
    a.cycle(2)  # A green
    a.cycle(4)  # E yellow
    nxt = a.next("CRATE")
    assert nxt.word == "CRATE"
    assert nxt.pattern == "..G.."
    assert nxt.cells[2] == LetterFeedback.correct("A", 2)
