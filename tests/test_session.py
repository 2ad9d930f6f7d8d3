import pytest
from wordler import Session, SessionState, suggest_word
from wordler.engine import (ConstraintSet, FrequencyTable, LetterFeedback, parse_feedback,
                            filter_candidates, InvalidFeedbackError, StrategyLockedError)
from wordler.strategies.sum_unique import SumUnique

# With the standard table:
#   SLATE 40.66 > CRATE = TRACE 38.72 > GRATE 37.91 > CRANE 36.15 > PLUMB 12.82
WORDS = ["CRANE", "CRATE", "TRACE", "SLATE", "PLUMB", "GRATE"]


@pytest.fixture
def session():
    return Session(WORDS, FrequencyTable.standard())


def answer(session, response):
    session.set_feedback(parse_feedback(response, session.current.word))
    return session.next()


@pytest.mark.parametrize("strategy_id", ["sum_unique", "mul_unique"])
def test_guess_the_word_proxy(strategy_id):
    game = Session.default(strategy_id=strategy_id)
    for resp, word in [
        ("..g..", "ATONE"),
        ("..g.y", "CHOIR"),
        ("..gy.", "SWORD"),
        (".gg.y", "GROUP"),
        ("ggg..", "PROMO"),
    ]:
        game.add_filters(parse_feedback(resp, word))

    assert game.suggest_word() == "PROXY"


def test_yellow_letters_show_up_in_suggestion():
    game = Session.default()
    game.add_filters([
        LetterFeedback.present("A", 0),
        LetterFeedback.present("R", 1),
        LetterFeedback.absent("E"),
        LetterFeedback.absent("T"),
    ])
    word = game.suggest_word()
    assert "A" in word and "R" in word
    assert word[0] != "A" and word[1] != "R"
    assert "E" not in word and "T" not in word


def test_initial_state(session):
    assert session.state is SessionState.NO_ATTEMPTS
    assert session.current.word == "SLATE"
    assert session.current.pattern == "....."
    assert session.history == []
    assert len(session.constraints) == 0
    assert session.word_length == 5


def test_ties_resolve_to_first_word():
    table = FrequencyTable.standard()
    assert suggest_word(["TRACE", "CRATE"], ConstraintSet(), SumUnique(table)) == "TRACE"
    # sessions keep their dictionary sorted
    assert Session(["TRACE", "CRATE"], table).current.word == "CRATE"


def test_suggest_word_none_when_exhausted():
    cs = ConstraintSet([LetterFeedback.absent("A"), LetterFeedback.absent("U")])
    assert suggest_word(WORDS, cs, SumUnique(FrequencyTable.standard())) is None


def test_next_commits_feedback_and_pins_greens(session):
    assert answer(session, "--GGG") is True
    assert session.state is SessionState.AWAITING_FEEDBACK
    assert [a.word for a in session.history] == ["SLATE"]
    assert session.current.word == "CRATE"
    assert session.current.pattern == "..GGG"
    assert LetterFeedback.absent("S") in session.constraints
    assert session.candidates() == ["CRATE", "GRATE"]
    assert session.candidates() == filter_candidates(session.words, session.constraints)


def test_cycle_edits_current_row(session):
    session.cycle(2)
    session.cycle(2)
    assert session.current.pattern == "..G.."
    session.next()
    assert LetterFeedback.correct("A", 2) in session.constraints


def test_set_feedback_must_fit_current_word(session):
    with pytest.raises(InvalidFeedbackError):
        session.set_feedback(parse_feedback("G....", "CRATE"))
    with pytest.raises(InvalidFeedbackError):
        session.set_feedback(parse_feedback("G...", "SLAT"))


def test_add_filters_drops_contradictions(session):
    session.add_filters([LetterFeedback.correct("A", 2)])
    before = session.constraints.copy()
    assert session.add_filters([LetterFeedback.absent("A")]) == []
    assert session.constraints == before


def test_undo_then_replay_gives_same_constraints(session):
    answer(session, "--GGG")
    answer(session, "YY...")
    snapshot = session.constraints.copy()

    assert session.undo() is True
    assert session.current.word == "CRATE"
    assert session.current.pattern == "YY..."
    assert [a.word for a in session.history] == ["SLATE"]

    session.next()
    assert session.constraints == snapshot


def test_undo_to_start_reopens_first_row(session):
    answer(session, "--GGG")
    assert session.undo() is True
    assert session.state is SessionState.NO_ATTEMPTS
    assert session.current.word == "SLATE"
    assert session.current.pattern == "..GGG"
    assert len(session.constraints) == 0


def test_undo_with_empty_history_is_noop(session):
    assert session.undo() is False
    assert session.current.word == "SLATE"
    assert session.state is SessionState.NO_ATTEMPTS


def test_out_of_candidates_is_reported_and_recoverable(session):
    assert answer(session, "Y....") is False
    assert session.state is SessionState.OUT_OF_CANDIDATES
    assert session.current is None
    assert session.next() is False
    assert session.not_a_word() is False

    assert session.undo() is True
    assert session.current.word == "SLATE"
    assert len(session.constraints) == 0


def test_not_a_word_removes_word_for_good(session):
    assert session.not_a_word() is True
    assert "SLATE" not in session.words
    assert session.current.word == "CRATE"
    assert session.state is SessionState.NO_ATTEMPTS

    session.reset()
    assert session.current.word == "CRATE"
    assert "SLATE" not in session.words
    fresh = Session(session.words, FrequencyTable.standard())
    assert session.current.word == fresh.current.word


def test_not_a_word_keeps_row_and_pinned_greens(session):
    answer(session, "--GGG")
    assert session.current.word == "CRATE"
    session.not_a_word()
    assert "CRATE" not in session.words
    assert session.current.word == "GRATE"
    assert session.current.pattern == "..GGG"
    assert [a.word for a in session.history] == ["SLATE"]


def test_reset_restores_initial_suggestion(session):
    answer(session, "--GGG")
    assert session.reset() is True
    assert session.state is SessionState.NO_ATTEMPTS
    assert session.current.word == "SLATE"
    assert session.history == []
    assert len(session.constraints) == 0


def test_strategy_switch_only_before_first_attempt(session):
    session.set_strategy("mul_unique")
    assert session.strategy.id == "mul_unique"
    fresh = Session(WORDS, FrequencyTable.standard(), strategy_id="mul_unique")
    assert session.current.word == fresh.current.word

    answer(session, "--GGG")
    with pytest.raises(StrategyLockedError):
        session.set_strategy("sum_unique")
    assert session.strategy.id == "mul_unique"


def test_dictionary_must_share_one_length():
    with pytest.raises(ValueError):
        Session(["CRANE", "CRANES"])
    with pytest.raises(ValueError):
        Session([])


def test_sessions_do_not_share_state():
    a = Session(WORDS, FrequencyTable.standard())
    b = Session(WORDS, FrequencyTable.standard())
    a.not_a_word()
    answer(a, "G....")
    assert "SLATE" in b.words
    assert len(b.constraints) == 0
