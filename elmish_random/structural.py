"""
Structural combinators: constant, pair, list_.
"""

from __future__ import annotations

from typing import List, Tuple, TypeVar

from .generator import Generator, _generate

A = TypeVar("A")
B = TypeVar("B")


def constant(value: A) -> Generator[A]:
    """Always the same object. Never touches a Source."""
    return _generate(lambda: value)


def pair(left: Generator[A], right: Generator[B]) -> Generator[Tuple[A, B]]:
    """
    Pairs of values, left drawn before right.

        points = pair(int_(0, 100), int_(0, 100))
        points.next()  # -> (73, 21)
    """
    return _generate(lambda: (left.next(), right.next()))


def list_(length: int, generator: Generator[A]) -> Generator[List[A]]:
    """
    Lists of exactly `length` draws from `generator`, in index order.

    For a random length, bind on a length generator:

        int_(1, 10).then(lambda n: list_(n, int_(0, 100)))
    """

    def _draw() -> List[A]:
        result: List[A] = []
        for _ in range(length):
            result.append(generator.next())
        return result

    return _generate(_draw)
