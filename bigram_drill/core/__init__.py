"""
bigram_drill.core

The engine behind the drill.
Contains:
 - per-bigram mistake/exposure statistics (BigramStatsStore)
 - the log-weighted weakness score (weakness_score)
 - weighted, capped word selection (WordSelector)
 - word sources and the per-learner session object
"""

from .bigram_stats import BigramStat, BigramStatsStore
from .scoring import weakness_score
from .word_selector import SelectorConfig, WordSelector
from .word_source import DEFAULT_WORDS, ListWordSource, load_word_list
from .session import PracticeSession

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
]
