"""Injectable random primitives used by every generator."""

import random
from typing import Optional, Sequence, TypeVar

T = TypeVar("T")

HEX_DIGITS = "0123456789abcdef"


class RandomSource:
    """Bounded random draws backed by a private ``random.Random``.

    Passing a seed makes every generator that draws from this source
    fully deterministic, which the tests rely on.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        """Initialize the random source.

        Args:
            seed: Optional seed for a fresh generator.
            rng: Optional pre-built generator (takes precedence over seed).
        """
        self._rng = rng if rng is not None else random.Random(seed)

    def between(self, low: int, high: int) -> int:
        """Draw an integer in the inclusive range [low, high]."""
        return self._rng.randint(low, high)

    def pick(self, collection: Sequence[T]) -> T:
        """Pick one element uniformly.

        Raises:
            ValueError: If the collection is empty.
        """
        if not collection:
            raise ValueError("Cannot pick from an empty collection")
        return self._rng.choice(collection)

    def hex_string(self, length: int) -> str:
        """Draw ``length`` lowercase hexadecimal characters."""
        return "".join(self._rng.choice(HEX_DIGITS) for _ in range(length))

    def fraction(self) -> float:
        """Draw a float in [0, 1)."""
        return self._rng.random()

    def uniform(self, low: float, high: float) -> float:
        """Draw a float uniformly between low and high."""
        return self._rng.uniform(low, high)

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self._rng.random() < probability
