# scoring.py
# weakness score for a single bigram.

from __future__ import annotations

import math

# occurrences start here so ln(occurrences) > 0 from the first miss
INITIAL_OCCURRENCES = 2


def weakness_score(misses: int, occurrences: int) -> float:
    """
    Log-weighted miss rate:

        score = (misses / occurrences) * ln(occurrences)

    The ratio keeps the score stable when the error rate is constant,
    the log factor lets it grow as evidence accumulates. Zero until
    the first miss.
    """
    if misses <= 0:
        return 0.0
    if occurrences < INITIAL_OCCURRENCES:
        raise ValueError(f"occurrences must be >= {INITIAL_OCCURRENCES}, got {occurrences}")
    return (misses / occurrences) * math.log(occurrences)
