import random
from typing import Protocol


class RandomSource(Protocol):
    """Uniform draws shared by every stochastic step of the algorithm."""

    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""

    def uniform(self, a: float, b: float) -> float:
        """Return a float uniformly drawn from [a, b]."""


class DefaultRandomSource:
    """Random source backed by the `random` module.

    Without a seed the module-level generator is used, so runs are not
    reproducible. With a seed a private `random.Random` is created.
    """

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._rng = random.Random(seed) if seed is not None else random

    def random(self) -> float:
        return self._rng.random()

    def uniform(self, a: float, b: float) -> float:
        return self._rng.uniform(a, b)
