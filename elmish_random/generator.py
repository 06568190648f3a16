"""
Generator engine.

A Generator wraps a Source and exposes exactly three operations:

    next()   -> draw one value
    map(f)   -> Generator whose values are f(value)
    then(f)  -> draw a value, let f pick the next Generator, draw from it

Composition is closure capture only. Nothing is cached and no past
output is remembered.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

A = TypeVar("A")
B = TypeVar("B")


class Generator(Generic[A]):
    """
    Opaque, immutable wrapper around one Source.

    Do not instantiate directly: factories in this package go through
    `_generate`.
    """

    __slots__ = ("_source",)

    def __init__(self, source: Callable[[], A]) -> None:
        self._source = source

    def next(self) -> A:
        return self._source()

    def map(self, transformer: Callable[[A], B]) -> "Generator[B]":
        """
        Transform every produced value.

            labels = int_(1, 99).map(str)
            labels.next()  # -> "32"
        """
        source = self._source
        return _generate(lambda: transformer(source()))

    def then(self, transformer: Callable[[A], "Generator[B]"]) -> "Generator[B]":
        """
        Feed each produced value into a function returning a new Generator,
        then draw from that Generator immediately.

            # list of random length 1-5 filled with ints 0-99
            lists = int_(1, 5).then(lambda n: list_(n, int_(0, 99)))
            lists.next()  # -> [21, 76]
        """
        source = self._source
        return _generate(lambda: transformer(source()).next())

    def __repr__(self) -> str:
        return "<Generator>"


def _generate(source: Callable[[], A]) -> Generator[A]:
    """The only place a Generator gets built."""
    return Generator(source)
