"""
Injectable random source for procedural spawning.

Games never call the `random` module directly; they draw from a
RandomSource so tests can seed it or script the exact sequence.
"""
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    """Minimal interface the spawners draw from."""

    def uniform(self, a: float, b: float) -> float:
        """Uniform float in [a, b]."""
        ...

    def coin_flip(self) -> bool:
        """Fair boolean draw."""
        ...

    def seed(self, value: Optional[int]) -> None:
        """Re-seed the generator."""
        ...


class SeededRandom:
    """RandomSource backed by a private `random.Random` instance.

    Two instances created with the same seed produce the same sequence,
    independent of any other randomness in the process.
    """

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def initial_seed(self) -> Optional[int]:
        """Seed this source was last seeded with (None = OS entropy)."""
        return self._seed

    def uniform(self, a: float, b: float) -> float:
        return self._random.uniform(a, b)

    def coin_flip(self) -> bool:
        return self._random.getrandbits(1) == 1

    def seed(self, value: Optional[int]) -> None:
        self._seed = value
        self._random.seed(value)
