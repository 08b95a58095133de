"""
bigram_drill - typing practice that keeps serving the letter pairs you miss.

    from bigram_drill import PracticeSession, ListWordSource

    session = PracticeSession(ListWordSource(["the", "cat", "dog"], seed=1))
    word = session.next_word()
    session.evaluate_attempt(word, "tge")
"""

from .core import (
    BigramStat,
    BigramStatsStore,
    weakness_score,
    SelectorConfig,
    WordSelector,
    DEFAULT_WORDS,
    ListWordSource,
    load_word_list,
    PracticeSession,
)
from .errors import BigramDrillError, EmptyWordSourceError, WordListError, ConfigError

__all__ = [
    "BigramStat",
    "BigramStatsStore",
    "weakness_score",
    "SelectorConfig",
    "WordSelector",
    "DEFAULT_WORDS",
    "ListWordSource",
    "load_word_list",
    "PracticeSession",
    "BigramDrillError",
    "EmptyWordSourceError",
    "WordListError",
    "ConfigError",
]

__version__ = "0.1.0"
