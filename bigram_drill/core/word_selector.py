# bigram_drill/core/word_selector.py
"""
WordSelector - picks the next practice word, biased toward weak bigrams.

Selection steps:
 1. take the top weak bigrams from the stats store
 2. keep pool words that contain at least one of them
 3. pad with other pool words up to `sample_floor` so there is always some variety
 4. weight each candidate: base_multiplier * prod(max(score, 1)) over the weak
    bigrams it contains, rounded up to a whole number of copies
 5. insert copies into a weighted pool, capped at `max_pool_size` in total
 6. draw uniformly from the weighted pool (or from the full pool if it is empty)
 7. count an exposure for every known bigram in the chosen word

The cap keeps the weighted pool bounded no matter how skewed the scores get,
and the compounding in step 4 rewards words that hit several weak bigrams.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Set
import logging
import math

from bigram_drill.errors import ConfigError
from .protocols import BigramStatsProtocol, WordSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectorConfig:
    """
    Tunables for the selector.
    """
    top_n: int = 10               # weak bigrams considered per selection
    sample_floor: int = 40        # minimum candidates before weighting
    base_multiplier: float = 1.8  # starting weight of every candidate
    max_pool_size: int = 300      # hard cap on weighted-pool insertions

    def __post_init__(self) -> None:
        if self.top_n < 0:
            raise ConfigError(f"top_n must be >= 0, got {self.top_n}")
        if self.sample_floor < 0:
            raise ConfigError(f"sample_floor must be >= 0, got {self.sample_floor}")
        if self.base_multiplier <= 0:
            raise ConfigError(f"base_multiplier must be > 0, got {self.base_multiplier}")
        if self.max_pool_size < 1:
            raise ConfigError(f"max_pool_size must be >= 1, got {self.max_pool_size}")


# Bigram helpers ---------------------------------------------------------------

def word_bigrams(word: str) -> List[str]:
    """Adjacent character pairs of `word`, in order, duplicates kept."""
    return [word[i:i + 2] for i in range(len(word) - 1)]


def contains_any(word: str, bigrams: Iterable[str]) -> bool:
    pairs = set(word_bigrams(word))
    return any(b in pairs for b in bigrams)


class WordSelector:
    """
    Weighted, capped word selection over a WordSource.

    Public API:
        select_next_word(word_pool=None)
        candidates(word_pool, weak)
        word_weight(word, weak)
        build_weighted_pool(candidates, weak)
    """

    def __init__(self,
                 store: BigramStatsProtocol,
                 source: WordSource,
                 config: Optional[SelectorConfig] = None):
        self.store = store
        self.source = source
        self.cfg = config or SelectorConfig()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def select_next_word(self, word_pool: Optional[Sequence[str]] = None) -> str:
        """
        Return the next practice word from `word_pool` (defaults to the
        source's full list) and record exposures for its known bigrams.
        """
        pool = self.source.words() if word_pool is None else word_pool

        weak = self.store.top_weak_bigrams(self.cfg.top_n)
        filtered = self.candidates(pool, weak)
        weighted = self.build_weighted_pool(filtered, weak)

        if weighted:
            word = self.source.random_word(weighted)
        else:
            # only reachable when the pool is empty; the source raises then
            word = self.source.random_word(pool)

        self._record_exposures(word)
        logger.debug("selected %r (weak=%s, candidates=%d, weighted=%d)",
                     word, weak, len(filtered), len(weighted))
        return word

    # ------------------------------------------------------------------
    # Candidate filtering + padding
    # ------------------------------------------------------------------
    def candidates(self, pool: Sequence[str], weak: Sequence[str]) -> List[str]:
        """
        Distinct pool words containing a weak bigram, padded with random
        other pool words until `sample_floor` is met or the pool runs out.
        """
        weak_set = set(weak)
        filtered: List[str] = []
        seen: Set[str] = set()
        for w in pool:
            if w in seen:
                continue
            if weak_set and contains_any(w, weak_set):
                filtered.append(w)
                seen.add(w)

        if len(filtered) >= self.cfg.sample_floor:
            return filtered

        remaining = [w for w in dict.fromkeys(pool) if w not in seen]
        while len(filtered) < self.cfg.sample_floor and remaining:
            w = self.source.random_word(remaining)
            remaining.remove(w)
            filtered.append(w)
        return filtered

    # ------------------------------------------------------------------
    # Weighting
    # ------------------------------------------------------------------
    def word_weight(self, word: str, weak: Sequence[str]) -> float:
        """
        base_multiplier times max(score, 1) for every weak bigram in `word`.
        Scores below 1 never shrink the weight.
        """
        pairs = set(word_bigrams(word))
        weight = self.cfg.base_multiplier
        for b in weak:
            if b in pairs:
                weight *= max(self.store.score_of(b), 1.0)
        return weight

    def build_weighted_pool(self, candidates: Sequence[str], weak: Sequence[str]) -> List[str]:
        """
        Expand candidates into a multiset with ceil(weight) copies each.
        Total insertions stop at `max_pool_size`.
        """
        cap = self.cfg.max_pool_size
        pool: List[str] = []
        for w in candidates:
            room = cap - len(pool)
            if room <= 0:
                break
            copies = math.ceil(min(self.word_weight(w, weak), room))
            pool.extend([w] * copies)
        return pool

    # ------------------------------------------------------------------
    # Feedback
    # ------------------------------------------------------------------
    def _record_exposures(self, word: str) -> None:
        for b in word_bigrams(word):
            if b in self.store:
                self.store.record_exposure(b)
