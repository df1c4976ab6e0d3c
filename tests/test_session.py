import math
import random
from collections import Counter

import pytest
from wordscramble.datasets import WordSource
from wordscramble.scramblers import create_scrambler
from wordscramble.session import GameSession, SessionState, SessionStateError
from wordscramble.stats import RoundResult


def _session(words=("apple",), seed=42):
    rng = random.Random(seed)
    return GameSession(WordSource(list(words), rng=rng), create_scrambler("reroll", rng=rng))


def test_start_round_produces_scrambled_puzzle():
    s = _session(["planet"])
    assert s.state is SessionState.IDLE
    puzzle = s.start_round()
    assert s.state is SessionState.ROUND_IN_PROGRESS
    assert puzzle.word == "planet"
    assert Counter(puzzle.scrambled) == Counter("planet")
    assert s.puzzle == puzzle


def test_correct_guess_is_recorded():
    s = _session()
    s.start_round()
    out = s.submit_guess("APPLE", elapsed=3.5)
    assert out.correct is True and out.word == "apple" and out.time_taken == 3.5
    assert s.state is SessionState.ROUND_RESOLVED
    assert s.entries() == (RoundResult("apple", 3.5),)


def test_wrong_guess_reports_word_and_leaves_ledger_alone():
    s = _session()
    s.start_round()
    out = s.submit_guess("aple", elapsed=2.0)
    assert out.correct is False
    assert out.word == "apple" and out.guess == "aple"
    assert s.entries() == ()
    assert s.last_outcome == out


def test_acknowledge_returns_to_idle_and_next_round_works():
    s = _session()
    s.start_round()
    s.submit_guess("apple", 1.0)
    s.acknowledge()
    assert s.state is SessionState.IDLE and s.puzzle is None
    s.start_round()
    s.submit_guess("apple", 2.0)
    assert [r.time_taken for r in s.entries()] == [2.0, 1.0]


def test_quit_only_from_idle():
    s = _session()
    s.start_round()
    with pytest.raises(SessionStateError):
        s.quit()
    s.submit_guess("apple", 1.0)
    with pytest.raises(SessionStateError):
        s.quit()
    s.acknowledge()
    s.quit()
    assert s.state is SessionState.EXIT
    with pytest.raises(SessionStateError):
        s.start_round()


@pytest.mark.parametrize("action", [
    lambda s: s.submit_guess("apple", 1.0),
    lambda s: s.acknowledge(),
])
def test_out_of_order_calls_from_idle(action):
    s = _session()
    with pytest.raises(SessionStateError):
        action(s)
    assert s.state is SessionState.IDLE


def test_cannot_start_twice():
    s = _session()
    s.start_round()
    with pytest.raises(SessionStateError):
        s.start_round()
    assert s.state is SessionState.ROUND_IN_PROGRESS


def test_negative_elapsed_rejected():
    s = _session()
    s.start_round()
    with pytest.raises(ValueError):
        s.submit_guess("apple", -1.0)
    assert s.state is SessionState.ROUND_IN_PROGRESS


def test_play_round_times_between_display_and_guess():
    s = _session()
    ticks = iter([10.0, 14.25])
    shown = []
    out = s.play_round(display=shown.append, read_guess=lambda: "Apple", clock=lambda: next(ticks))
    assert shown and shown[0].word == "apple"
    assert out.correct is True and out.time_taken == pytest.approx(4.25)
    assert s.state is SessionState.ROUND_RESOLVED


def test_stats_passthroughs():
    s = _session(["cat"])
    for t in (1.0, 2.0, 3.0):
        s.start_round()
        s.submit_guess("cat", t)
        s.acknowledge()
    assert [row.rank for row in s.table_view()] == [1, 2, 3]
    assert [(b.word, b.percentage) for b in s.breakdown_view()] == [("cat", 100.0)]
    assert s.timing_summary()["median"] == 2.0


def test_ledger_keeps_last_five_wins():
    s = _session(["cat"])
    for t in range(1, 8):
        s.start_round()
        s.submit_guess("cat", float(t))
        s.acknowledge()
    assert [r.time_taken for r in s.entries()] == [7.0, 6.0, 5.0, 4.0, 3.0]


def test_nan_elapsed_rejected():
    s = _session()
    s.start_round()
    with pytest.raises(ValueError):
        s.submit_guess("apple", math.nan)
    assert s.entries() == ()
    assert s.state is SessionState.ROUND_IN_PROGRESS
