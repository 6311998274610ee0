"""Randomness for sample datasets: polynomial coefficients and tamper offsets.

Generated datasets are only reproducible when a seed is set; the default
draws fresh bytes from the OS on every call.
"""

import os
import random as _random


class DeterministicRNG:
    """Integer source for the dataset generator.

    A seeded instance replays the same coefficients and offsets; an unseeded
    one reads os.urandom.
    """

    def __init__(self, seed=None):
        self._rng = _random.Random(seed) if seed is not None else None

    def randbelow(self, n: int) -> int:
        if self._rng is None:
            return int.from_bytes(os.urandom(16), 'big') % n
        return self._rng.randrange(n)


_source = DeterministicRNG()


def set_seed(seed: int | None):
    """Reseed the shared source; None switches back to OS randomness."""
    global _source
    _source = DeterministicRNG(seed)


def randbelow(n: int) -> int:
    return _source.randbelow(n)
