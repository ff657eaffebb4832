"""Cons lists and stepping through a list of favourite fruits."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_FAVOURITE_FRUITS = ("banana", "custard apple", "avocado", "peach", "raspberry")


@dataclass(frozen=True)
class Nil:
    """The end of a cons list."""


@dataclass(frozen=True)
class Cons:
    """One item of a cons list: a value followed by the rest of the list."""

    value: int
    rest: Cons | Nil

    def __post_init__(self) -> None:
        if not -(2**31) <= self.value < 2**31:
            raise ValueError(f"value {self.value} does not fit in 32 bits")
        if not isinstance(self.rest, (Cons, Nil)):
            raise TypeError(f"rest of a cons list must be Cons or Nil, got {self.rest!r}")

    def __iter__(self) -> Iterator[int]:
        node: Cons | Nil = self
        while isinstance(node, Cons):
            yield node.value
            node = node.rest


def create_empty_list() -> Nil:
    """A cons list without items."""
    return Nil()


def create_non_empty_list() -> Cons:
    """A cons list holding a single item."""
    return Cons(1, Nil())


def favourite_fruits() -> Iterator[str]:
    """An iterator over the favourite fruits, in order."""
    return iter(_FAVOURITE_FRUITS)