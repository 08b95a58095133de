# diagnostics.py
# debug helpers for inspecting bigram scores. Nothing here mutates the store.

from __future__ import annotations

import json
import logging
from typing import List, Optional, Tuple

from .bigram_stats import BigramStatsStore

logger = logging.getLogger(__name__)

StatsRow = Tuple[str, float, int, int]  # bigram, score, misses, occurrences


def log_bigram_scores(store: BigramStatsStore, log: Optional[logging.Logger] = None) -> bool:
    """Dump the current score table as JSON at DEBUG level."""
    log = log or logger
    log.debug("Current bigram scores table:\n%s", json.dumps(store.export_stats(), indent=2))
    return True


def stats_rows(store: BigramStatsStore, n: int = 10) -> List[StatsRow]:
    """Rows for the weakest `n` bigrams, in ranking order."""
    rows = []
    for bigram in store.top_weak_bigrams(n):
        stat = store.get(bigram)
        rows.append((bigram, stat.score, stat.misses, stat.occurrences))
    return rows
