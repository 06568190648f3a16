"""
Numeric primitives: floats, fixed-precision floats, ints, booleans.

Every factory takes an optional unit-interval Source. No bounds are
validated: reversed bounds simply give the reversed interval.
"""

from __future__ import annotations

import math
from typing import Callable, Optional

from .config import resolve_source
from .generator import Generator, _generate
from .sources import Source


def float_(
    min_: float,
    max_: float,
    source: Optional[Source[float]] = None,
) -> Generator[float]:
    """
    Floats in [min_, max_).

        gen = float_(0, 10, simple_seeded(123))
        gen.next()  # -> e.g. 3.2427879012
    """
    return _generate(resolve_source(source)).map(lambda u: min_ + (max_ - min_) * u)


def float_with_precision(
    min_: float,
    max_: float,
    precision: int,
    source: Optional[Source[float]] = None,
) -> Generator[float]:
    """
    Floats in [min_, max_) truncated (floored) to `precision` decimal digits.

        float_with_precision(0, 10, 2).next()  # -> e.g. 3.24
    """
    return float_(min_, max_, source).map(_to_precision(precision))


def _to_precision(precision: int) -> Callable[[float], float]:
    power = 10 ** precision

    def _floor(x: float) -> float:
        return math.floor(x * power) / power

    return _floor


def int_(
    min_: int,
    max_: int,
    source: Optional[Source[float]] = None,
) -> Generator[int]:
    """Return Generator of ints in [min_, max_] inclusive."""
    # widen by one and floor: uniform over the inclusive range
    return float_with_precision(min_, max_ + 1, 0, source).map(int)


def boolean(source: Optional[Source[float]] = None) -> Generator[bool]:
    """Return Generator of booleans, True when the draw is > 0.5."""
    return _generate(resolve_source(source)).map(lambda u: u > 0.5)
