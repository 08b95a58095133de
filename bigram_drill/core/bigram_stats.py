# bigram_drill/core/bigram_stats.py
"""
BigramStatsStore
----------------
Per-session record of which two-character sequences the learner mistypes.

 - keys are exact, case-sensitive two-character strings
 - a bigram enters the store on its first miss and is never evicted
 - `occurrences` counts exposures and starts at 2, so the log factor of
   the score is positive from the very first miss
 - score is always derived from (misses, occurrences), never set directly

Public API:
    record_mistake(target_word, typed_prefix_length)
    record_exposure(bigram)
    score_of(bigram)
    top_weak_bigrams(n)
    export_stats()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional
import logging

from .protocols import StatsSnapshot
from .scoring import INITIAL_OCCURRENCES, weakness_score

logger = logging.getLogger(__name__)

BIGRAM_LEN = 2
DEFAULT_TOP_N = 10


@dataclass
class BigramStat:
    """Counters for one bigram. `score` is computed on read."""
    misses: int = 0
    occurrences: int = INITIAL_OCCURRENCES

    def __post_init__(self) -> None:
        if self.misses < 0:
            raise ValueError(f"misses must be >= 0, got {self.misses}")
        if self.occurrences < INITIAL_OCCURRENCES:
            raise ValueError(f"occurrences must be >= {INITIAL_OCCURRENCES}, got {self.occurrences}")

    @property
    def score(self) -> float:
        return weakness_score(self.misses, self.occurrences)


class BigramStatsStore:
    """
    Mapping bigram -> BigramStat, owned by one practice session.
    Insertion order of the mapping is kept; it serves as the tie-break
    order for equal scores.
    """

    def __init__(self) -> None:
        self._stats: Dict[str, BigramStat] = {}

    # Updates ------------------------------------------------------------------
    def record_mistake(self, target_word: str, typed_prefix_length: int) -> Optional[str]:
        """
        Attribute an incorrect keystroke to the bigram made of the last
        confirmed character and the character the learner missed.

        Returns the bigram that was charged, or None when fewer than two
        characters are available at that offset (boundary mistakes are noise).
        """
        start = typed_prefix_length - 1
        if start < 0:
            return None
        bigram = target_word[start:start + BIGRAM_LEN]
        if len(bigram) < BIGRAM_LEN:
            return None

        stat = self._stats.get(bigram)
        if stat is None:
            stat = self._stats[bigram] = BigramStat()
        stat.misses += 1
        logger.debug("miss on %r in %r -> misses=%d score=%.4f",
                     bigram, target_word, stat.misses, stat.score)
        return bigram

    def record_exposure(self, bigram: str) -> None:
        """Count one more exposure of a known bigram. Unknown bigrams are ignored."""
        stat = self._stats.get(bigram)
        if stat is None:
            return
        stat.occurrences += 1

    # Queries --------------------------------------------------------------------
    def score_of(self, bigram: str) -> float:
        stat = self._stats.get(bigram)
        return stat.score if stat is not None else 0.0

    def misses_of(self, bigram: str) -> int:
        stat = self._stats.get(bigram)
        return stat.misses if stat is not None else 0

    def occurrences_of(self, bigram: str) -> int:
        """Exposure count, or 0 for a bigram never missed."""
        stat = self._stats.get(bigram)
        return stat.occurrences if stat is not None else 0

    def get(self, bigram: str) -> Optional[BigramStat]:
        return self._stats.get(bigram)

    def top_weak_bigrams(self, n: int = DEFAULT_TOP_N) -> List[str]:
        """
        Up to `n` bigrams ordered by score, highest first.
        sorted() is stable, so equal scores keep insertion order.
        """
        if n <= 0 or not self._stats:
            return []
        ranked = sorted(self._stats.items(), key=lambda kv: kv[1].score, reverse=True)
        return [bigram for bigram, _ in ranked[:n]]

    # Diagnostics ------------------------------------------------------------------
    def export_stats(self) -> StatsSnapshot:
        """Detached snapshot: bigram -> {score, misses, occurrences}."""
        return {
            bigram: {
                "score": stat.score,
                "misses": stat.misses,
                "occurrences": stat.occurrences,
            }
            for bigram, stat in self._stats.items()
        }

    def total_misses(self) -> int:
        return sum(stat.misses for stat in self._stats.values())

    # Container protocol ------------------------------------------------------------
    def __contains__(self, bigram: object) -> bool:
        return bigram in self._stats

    def __len__(self) -> int:
        return len(self._stats)

    def __iter__(self) -> Iterator[str]:
        return iter(self._stats)

    def __repr__(self) -> str:
        return f"BigramStatsStore(bigrams={len(self._stats)}, misses={self.total_misses()})"
