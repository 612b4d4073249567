"""Random-draw primitives shared by the synthetic engine and advisories.

Every draw goes through a `RandomSource` so callers can inject a seeded
`random.Random` (or a scripted fake) and get reproducible reports.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Anything yielding uniform floats in [0, 1); `random.Random` fits."""

    def random(self) -> float:
        """Return the next uniform draw."""


def uniform_int(source: RandomSource, low: int, high: int) -> int:
    """Return an integer in the half-open range [low, high)."""

    if high <= low:
        raise ValueError(f"Empty range: [{low}, {high})")
    return low + math.floor(source.random() * (high - low))


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


class CategoricalDistribution(Generic[T]):
    """Weighted choice over a fixed, ordered set of categories."""

    def __init__(
        self, choices: Sequence[tuple[T, float]], *, fallback: T
    ) -> None:
        if not choices:
            raise ValueError("At least one category is required.")
        if any(weight < 0 for _, weight in choices):
            raise ValueError("Category weights must be non-negative.")
        self.choices: tuple[tuple[T, float], ...] = tuple(choices)
        self.fallback = fallback

    def sample(self, source: RandomSource) -> T:
        draw = source.random()
        cumulative = 0.0
        for category, weight in self.choices:
            cumulative += weight
            if draw <= cumulative:
                return category
        # Weights summing to slightly under 1.0 can leave a draw unmatched.
        return self.fallback
