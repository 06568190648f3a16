"""
Selection primitives: uniform and weighted choice.

Both take a mandatory `first` candidate plus a possibly-empty `rest`, so an
empty choice cannot be expressed. With no `rest` they collapse to
`constant(first)` and never consult the Source.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, TypeVar

from .generator import Generator
from .numeric import float_, int_
from .sources import Source
from .structural import constant

A = TypeVar("A")

Weighted = Tuple[A, float]


class WeightInvariantError(Exception):
    """
    Raised when a weighted scan runs past the last candidate.

    Only reachable when the cumulative weights are not monotonic, i.e. a
    negative weight was supplied.
    """

    def __init__(self, draw: float, total: float) -> None:
        self.draw = draw
        self.total = total
        super().__init__(
            f"[INVARIANT:weighted_scan] draw={draw!r} matched no candidate "
            f"(cumulative total={total!r}); weights must be non-negative"
        )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def uniform(
    first: A,
    rest: Sequence[A],
    source: Optional[Source[float]] = None,
) -> Generator[A]:
    """
    Each candidate with equal probability.

        suits = uniform("Club", ["Diamond", "Spade", "Heart"])
        suits.next()  # -> "Spade"
    """
    if not rest:
        return constant(first)
    candidates = [first, *rest]
    return int_(0, len(rest), source).map(lambda i: candidates[i])


def weighted(
    first: Weighted[A],
    rest: Sequence[Weighted[A]],
    source: Optional[Source[float]] = None,
) -> Generator[A]:
    """
    Each candidate with probability weight / total.

        loaded_die = weighted(
            (1, 10), [(2, 10), (3, 10), (4, 10), (5, 20), (6, 40)])

    Weights need not add up to anything in particular.
    """
    if not rest:
        return constant(first[0])
    cumulative = cumulative_weights([first, *rest])
    total = cumulative[-1][1]
    return float_(0, total, source).map(lambda draw: pick_by_weight(cumulative, draw))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def cumulative_weights(candidates: Sequence[Weighted[A]]) -> List[Weighted[A]]:
    """Running inclusive sum of weights, in the order given."""
    running = 0
    result: List[Weighted[A]] = []
    for value, weight in candidates:
        running += weight
        result.append((value, running))
    return result


def pick_by_weight(cumulative: Sequence[Weighted[A]], draw: float) -> A:
    """First candidate whose cumulative weight is >= draw."""
    for value, upto in cumulative:
        if draw <= upto:
            return value
    total = cumulative[-1][1] if cumulative else 0
    raise WeightInvariantError(draw, total)
