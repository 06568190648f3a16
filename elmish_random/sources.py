"""
Sources: zero-argument callables that yield one unit-interval value per call.

A Source owns whatever state it needs. Nothing here touches the global
`random` module state except `ambient_source`, which IS the global
`random.random`.
"""

from __future__ import annotations

import math
import random
from typing import Callable, List, Sequence, TypeVar

A = TypeVar("A")

Source = Callable[[], A]

ambient_source: Source[float] = random.random


class SimpleSeededSource:
    """
    Very simple seeded source: seed := sin(seed) * 10000, yield its
    fractional part.

    Low-quality pseudo randomness for illustration and tests only.
    The "simple" in the name is there on purpose.
    """

    __slots__ = ("_seed",)

    def __init__(self, seed: float) -> None:
        self._seed = seed

    def __call__(self) -> float:
        self._seed = math.sin(self._seed) * 10000
        return self._seed - math.floor(self._seed)


def simple_seeded(seed: float) -> Source[float]:
    """Return a SimpleSeededSource for `seed`."""
    return SimpleSeededSource(seed)


class DeterministicSource:
    """Local seeded source. No global random state touched."""

    __slots__ = ("_seed", "_rng")

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def __call__(self) -> float:
        """Return the next float in [0, 1)."""
        return self._rng.random()


def sequence_source(values: Sequence[float]) -> Source[float]:
    """
    Cycle through a fixed list of values, one per call.

    Handy for asserting exactly which draw a generator consumed.
    """
    if not values:
        raise ValueError("sequence_source needs at least one value")
    items: List[float] = list(values)
    position = 0

    def _next() -> float:
        nonlocal position
        value = items[position]
        position = (position + 1) % len(items)
        return value

    return _next
