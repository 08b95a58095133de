# bigram_drill/errors.py
# exception types raised by the drill. Everything derives from BigramDrillError
# so the CLI can catch one base class at the top level.


class BigramDrillError(Exception):
    """Base class for all bigram_drill errors."""


class EmptyWordSourceError(BigramDrillError):
    """Raised by a word source asked to draw from an empty sequence."""


class WordListError(BigramDrillError):
    """Raised when a word list file cannot be read."""


class ConfigError(BigramDrillError):
    """Raised for invalid configuration keys or values."""
