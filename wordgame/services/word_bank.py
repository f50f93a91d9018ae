"""
Word Bank

Static list of candidate secret words plus the RNG used to draw from it.
"""

import random
from typing import Iterable, Optional


class WordBank:
    """Uniform random selection over a fixed word list."""

    def __init__(self, words: Iterable[str], rng: Optional[random.Random] = None):
        self.words = tuple(word.lower() for word in words)
        if not self.words:
            raise ValueError("Word list cannot be empty")
        self._lookup = frozenset(self.words)
        self.rng = rng or random.Random()

    def choose(self) -> str:
        return self.rng.choice(self.words)

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and word.lower() in self._lookup

    def __len__(self) -> int:
        return len(self.words)
