"""Bounded uniform random number generation."""

from __future__ import annotations

import math
import random


class BoundedRandomSource:
    """Callable producing values uniformly distributed in [low, high).

    Bounds are normalized on construction so that passing them in either
    order gives the same interval. When both bounds are equal every draw
    returns that value.

    The underlying ``random.Random`` can be injected (seeded) for
    deterministic tests. It is not shared across sources unless the caller
    shares it, and like ``random.Random`` itself a source should be confined
    to one thread or guarded by the caller.

    Example:
        >>> source = BoundedRandomSource(10.0, 5.0, rng=random.Random(42))
        >>> 5.0 <= source() < 10.0
        True
    """

    def __init__(self, start: float, end: float, rng: random.Random | None = None) -> None:
        if not (math.isfinite(start) and math.isfinite(end)):
            raise ValueError(f"Bounds must be finite, got ({start}, {end})")
        if end < start:
            start, end = end, start
        self.low = start
        self.high = end
        self._rng = rng if rng is not None else random.Random()

    def __call__(self) -> float:
        if self.low == self.high:
            return self.low
        r = self._rng.random()
        # Weighted sum stays finite even when high - low overflows
        value = self.low * (1 - r) + self.high * r
        # Rounding can land on or just past either bound
        if value >= self.high:
            return math.nextafter(self.high, self.low)
        if value < self.low:
            return self.low
        return value

    def sample(self, n: int) -> list[float]:
        """Draw n independent values."""
        if n < 0:
            raise ValueError("n must be >= 0")
        return [self() for _ in range(n)]

    def __repr__(self) -> str:
        return f"BoundedRandomSource(low={self.low!r}, high={self.high!r})"


def make_random_generator(
    start: float,
    end: float,
    rng: random.Random | None = None,
) -> BoundedRandomSource:
    """Create a generator whose outputs lie within the given range.

    Args:
        start: One bound of the range.
        end: The other bound; may be less than start.
        rng: Optional seeded random.Random to draw from.

    Returns:
        Zero-argument callable returning a value in [min, max).
    """
    return BoundedRandomSource(start, end, rng=rng)
