from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from random_color.options import Seed, seed_to_value


@dataclass
class SeededRandom:
    """
    Pseudo-random source owned by a single generator.

    The state advances on every draw, so one seed yields a reproducible sequence.
    With seed=None the source is initialised from OS entropy. Not thread-safe.
    """
    seed: Optional[Seed] = None

    def __post_init__(self):
        if self.seed is not None:
            self.seed = seed_to_value(self.seed)
        self._random = random.Random(self.seed)

    def reseed(self, seed: Seed) -> None:
        """Change the seed and reset the generator."""
        self.seed = seed_to_value(seed)
        self._random = random.Random(self.seed)

    def within(self, lo: int, hi: int) -> int:
        """Draw an integer from [lo, hi).

        Inverted bounds are swapped and an empty range is widened to [lo, lo + 1).
        """
        if lo > hi:
            lo, hi = hi, lo
        if lo == hi:
            hi += 1
        return self._random.randrange(lo, hi)
