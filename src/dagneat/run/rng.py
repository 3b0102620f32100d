"""
Random Number Generator Module

This module implements the RandomGenerator class, the source of randomness
handed to every component that needs it (for now, the Mutator).

Classes:
    RandomGenerator: Seedable source of uniform, boolean and index draws
"""

import random
from typing import Sequence, TypeVar

T = TypeVar("T")

class RandomGenerator:
    """
    A seedable random number generator.

    Each instance owns its own random stream, so two generators built from the
    same seed produce the same draws, and a generator can be given to each
    worker of a parallel run without any sharing. Without a seed the stream
    is seeded from system entropy (not reproducible).

    Public Methods:
        uniform01():          Real in [0, 1)
        bernoulli(p):         True with probability p
        uniform_range(r):     Real in [-r, r]
        random_index(n):      Integer in [0, n)
        pick_one(sequence):   Uniformly chosen element
        seed(value):          Restart the stream from a seed
    """

    def __init__(self, seed: int | None = None):
        self._random = random.Random(seed)

    def seed(self, value: int | None) -> None:
        self._random.seed(value)

    def uniform01(self) -> float:
        return self._random.random()

    def bernoulli(self, p: float) -> bool:
        """True with probability 'p' (never for p=0, always for p=1)."""
        return self._random.random() < p

    def uniform_range(self, value_range: float) -> float:
        """A real drawn uniformly from [-value_range, value_range]."""
        return (self._random.random() * 2.0 - 1.0) * value_range

    def random_index(self, n: int) -> int:
        """An integer drawn uniformly from [0, n)."""
        return self._random.randrange(n)

    def pick_one(self, sequence: Sequence[T]) -> T:
        return sequence[self.random_index(len(sequence))]
