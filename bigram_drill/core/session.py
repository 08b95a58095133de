# bigram_drill/core/session.py
"""
PracticeSession
Owns one stats store and one selector for a single learner's session, so
several sessions can live side by side without sharing counters.

Two ways to feed mistakes in:
 - register_keystroke(): one call per keystroke, for live key capture
 - evaluate_attempt(): compare a whole typed word against its target (CLI)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .bigram_stats import BigramStatsStore
from .protocols import WordSource
from .word_selector import SelectorConfig, WordSelector

logger = logging.getLogger(__name__)


def mistake_offsets(target_word: str, typed: str) -> List[int]:
    """
    Prefix lengths at which `typed` goes wrong against `target_word`.

    Every mismatching position counts. If `typed` stops short, the first
    missing character counts as one more mistake. Extra trailing characters
    have no target bigram and are ignored.
    """
    offsets = [i for i, (want, got) in enumerate(zip(target_word, typed)) if want != got]
    if len(typed) < len(target_word):
        offsets.append(len(typed))
    return offsets


class PracticeSession:
    def __init__(self, source: WordSource, config: Optional[SelectorConfig] = None):
        self.source = source
        self.store = BigramStatsStore()
        self.selector = WordSelector(self.store, source, config)
        self.words_served = 0
        self.current_word: Optional[str] = None

    def register_keystroke(self, target_word: str, current_input: str, is_correct: bool) -> Optional[str]:
        """
        Keystroke hook. `current_input` is the correctly typed prefix before
        this key. Correct keys change nothing.
        """
        if is_correct:
            return None
        return self.store.record_mistake(target_word, len(current_input or ""))

    def evaluate_attempt(self, target_word: str, typed: str) -> List[int]:
        """Record a mistake for every divergence of `typed`; return the offsets."""
        offsets = mistake_offsets(target_word, typed)
        for off in offsets:
            self.store.record_mistake(target_word, off)
        if offsets:
            logger.debug("attempt %r for %r: mistakes at %s", typed, target_word, offsets)
        return offsets

    def next_word(self) -> str:
        word = self.selector.select_next_word()
        self.words_served += 1
        self.current_word = word
        return word

    def stats(self, n: int = 5) -> Dict[str, Any]:
        """Summary bundle used by the CLI."""
        return {
            "words_served": self.words_served,
            "mistakes": self.store.total_misses(),
            "distinct_bigrams": len(self.store),
            "top": self.store.top_weak_bigrams(n),
        }
