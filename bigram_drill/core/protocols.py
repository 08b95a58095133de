# bigram_drill/core/protocols.py
"""
Protocol interfaces for the collaborators the drill depends on.

The selector only needs a candidate list and a uniform draw, so the word
source is described as a Protocol rather than a concrete class. Tests
and the CLI can then plug in anything that provides those two methods.
"""

from __future__ import annotations

from typing import Protocol, Sequence, Dict, runtime_checkable
from typing_extensions import TypedDict


# Typed structures ------------------------------------------------------------

class BigramSnapshot(TypedDict):
    """
    Read-only view of one bigram's statistics, as exported for diagnostics.

    Example:
      {"th": {"score": 0.6908, "misses": 3, "occurrences": 10}}
    """
    score: float
    misses: int
    occurrences: int


StatsSnapshot = Dict[str, BigramSnapshot]  # mapping: bigram -> snapshot


# Protocols -------------------------------------------------------------------

@runtime_checkable
class WordSource(Protocol):
    """Supplies the candidate pool and uniform random draws over any sequence."""

    def words(self) -> Sequence[str]:
        """Full ordered candidate list. Never mutated by callers."""
        ...

    def random_word(self, words: Sequence[str]) -> str:
        """
        Uniform draw from `words`. Implementations raise
        EmptyWordSourceError when `words` is empty.
        """
        ...


@runtime_checkable
class BigramStatsProtocol(Protocol):
    """The slice of the stats store the selector reads and updates."""

    def top_weak_bigrams(self, n: int = 10) -> list:
        ...

    def score_of(self, bigram: str) -> float:
        ...

    def record_exposure(self, bigram: str) -> None:
        ...

    def __contains__(self, bigram: object) -> bool:
        ...
