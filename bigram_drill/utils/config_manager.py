# config_manager.py - JSON config manager for the drill

import json
import logging
import os

from bigram_drill.core.word_selector import SelectorConfig
from bigram_drill.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULTS = {
    "top_n": 10,            # weak bigrams considered per selection
    "sample_floor": 40,     # minimum candidate words before weighting
    "base_multiplier": 1.8, # starting weight of each candidate
    "max_pool_size": 300,   # cap on weighted pool insertions
    "word_list": "",        # path to a word list, empty = built-in words
    "seed": None,           # RNG seed, None = nondeterministic
}


class Config:
    def __init__(self, path="bigram_drill.json"):
        self.path = path
        self.data = dict(DEFAULTS)
        self._load()

    def _load(self):
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("config %s unreadable, using defaults: %s", self.path, e)
            return
        if not isinstance(loaded, dict):
            logger.warning("config %s is not a JSON object, using defaults", self.path)
            return
        for k, v in loaded.items():
            if k in DEFAULTS:
                self.data[k] = v
            else:
                logger.warning("ignoring unknown config key %r", k)

    def save(self):
        with open(self.path, "w", encoding="utf8") as f:
            json.dump(self.data, f, indent=2)

    def get(self, key, default=None):
        return self.data.get(key, default)

    def set(self, key, val):
        if key not in self.data:
            raise ConfigError(f"No such option: {key}")
        current = DEFAULTS[key]
        try:
            if current is None:
                # seed: None or an int
                self.data[key] = None if val in (None, "", "none", "None") else int(val)
            else:
                self.data[key] = type(current)(val)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"bad value for {key}: {val!r}") from e

    def selector_config(self) -> SelectorConfig:
        """Validated SelectorConfig from the current values."""
        try:
            return SelectorConfig(
                top_n=int(self.data["top_n"]),
                sample_floor=int(self.data["sample_floor"]),
                base_multiplier=float(self.data["base_multiplier"]),
                max_pool_size=int(self.data["max_pool_size"]),
            )
        except (TypeError, ValueError) as e:
            raise ConfigError(f"invalid selector settings: {e}") from e
