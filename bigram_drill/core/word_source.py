# word_source.py
# Candidate word pools for the drill: an in-memory list with a seeded RNG,
# a loader for plain-text word lists, and a built-in default list.

from __future__ import annotations

import logging
import random
from pathlib import Path
from typing import Iterable, Optional, Sequence, Tuple, Union

from bigram_drill.errors import EmptyWordSourceError, WordListError

logger = logging.getLogger(__name__)

# common English words, short enough to type in one go
DEFAULT_WORDS: Tuple[str, ...] = (
    "the", "be", "of", "and", "a", "to", "in", "he", "have", "it",
    "that", "for", "they", "with", "as", "not", "on", "she", "at", "by",
    "this", "we", "you", "do", "but", "from", "or", "which", "one", "would",
    "all", "will", "there", "say", "who", "make", "when", "can", "more", "if",
    "no", "man", "out", "other", "so", "what", "time", "up", "go", "about",
    "than", "into", "could", "state", "only", "new", "year", "some", "take", "come",
    "these", "know", "see", "use", "get", "like", "then", "first", "any", "work",
    "now", "may", "such", "give", "over", "think", "most", "even", "find", "day",
    "also", "after", "way", "many", "must", "look", "before", "great", "back", "through",
    "long", "where", "much", "should", "well", "people", "down", "own", "just", "because",
    "good", "each", "those", "feel", "seem", "how", "high", "too", "place", "little",
    "world", "very", "still", "nation", "hand", "old", "life", "tell", "write", "become",
    "here", "show", "house", "both", "between", "need", "mean", "call", "develop", "under",
    "last", "right", "move", "thing", "general", "school", "never", "same", "another", "begin",
    "while", "number", "part", "turn", "real", "leave", "might", "want", "point", "form",
    "off", "child", "few", "small", "since", "against", "ask", "late", "home", "interest",
    "large", "person", "end", "open", "public", "follow", "during", "present", "without", "again",
    "hold", "govern", "around", "possible", "head", "consider", "word", "program", "problem", "however",
)


class ListWordSource:
    """
    WordSource over a fixed, ordered list of words.

    The list is copied into a tuple so callers cannot mutate the pool.
    Pass `rng` (or `seed`) to make draws reproducible.
    """

    def __init__(self,
                 words: Iterable[str] = DEFAULT_WORDS,
                 rng: Optional[random.Random] = None,
                 seed: Optional[int] = None):
        self._words: Tuple[str, ...] = tuple(words)
        self._rng = rng or random.Random(seed)

    def words(self) -> Sequence[str]:
        return self._words

    def random_word(self, words: Sequence[str]) -> str:
        if not words:
            raise EmptyWordSourceError("cannot draw a word from an empty pool")
        return self._rng.choice(words)

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return f"ListWordSource(words={len(self._words)})"


def load_word_list(path: Union[str, Path]) -> Tuple[str, ...]:
    """
    Read a UTF-8 word list: one word per line.
    Blank lines and lines starting with '#' are skipped.
    """
    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise WordListError(f"cannot read word list {p}: {e}") from e

    words = []
    for line in text.splitlines():
        w = line.strip()
        if not w or w.startswith("#"):
            continue
        words.append(w)

    logger.info("loaded %d words from %s", len(words), p)
    return tuple(words)
