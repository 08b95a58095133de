# tests/test_session.py
import pytest

from bigram_drill.core.session import PracticeSession, mistake_offsets
from bigram_drill.core.word_selector import SelectorConfig
from bigram_drill.core.word_source import ListWordSource


@pytest.fixture
def session():
    return PracticeSession(ListWordSource(["the", "cat", "dog"], seed=11))


@pytest.mark.parametrize("target,typed,expected", [
    ("the", "the", []),
    ("the", "tge", [1]),
    ("the", "th", [2]),
    ("the", "", [0]),
    ("the", "thex", []),
    ("cat", "dog", [0, 1, 2]),
    ("cat", "cx", [1, 2]),
])
def test_mistake_offsets(target, typed, expected):
    assert mistake_offsets(target, typed) == expected


def test_evaluate_attempt_charges_bigram(session):
    assert session.evaluate_attempt("the", "tge") == [1]
    assert session.store.misses_of("th") == 1
    assert list(session.store) == ["th"]


def test_evaluate_attempt_first_char_is_noise(session):
    assert session.evaluate_attempt("the", "xhe") == [0]
    assert len(session.store) == 0


def test_evaluate_attempt_short_input(session):
    session.evaluate_attempt("the", "th")
    assert session.store.misses_of("he") == 1


def test_register_keystroke(session):
    assert session.register_keystroke("the", "t", True) is None
    assert len(session.store) == 0

    assert session.register_keystroke("the", "t", False) == "th"
    assert session.register_keystroke("the", "th", False) == "he"
    assert session.register_keystroke("the", "", False) is None
    assert session.register_keystroke("the", None, False) is None
    assert session.store.total_misses() == 2


def test_next_word_tracks_progress(session):
    w = session.next_word()
    assert w in {"the", "cat", "dog"}
    assert session.current_word == w
    session.next_word()
    assert session.words_served == 2


def test_stats_bundle(session):
    for _ in range(3):
        session.evaluate_attempt("the", "tge")
    session.evaluate_attempt("dog", "dig")
    s = session.stats()
    assert s["mistakes"] == 4
    assert s["distinct_bigrams"] == 2
    assert s["top"] == ["th", "do"]
    assert s["words_served"] == 0


def test_sessions_do_not_share_counters():
    a = PracticeSession(ListWordSource(["the"], seed=1))
    b = PracticeSession(ListWordSource(["the"], seed=1))
    a.evaluate_attempt("the", "tge")
    assert b.store.misses_of("th") == 0
    assert a.store is not b.store


def test_config_is_passed_to_selector():
    cfg = SelectorConfig(max_pool_size=7)
    s = PracticeSession(ListWordSource(["the"]), cfg)
    assert s.selector.cfg is cfg
    assert s.selector.store is s.store
