"""Arbitrary-length coproducts, and heterogeneous sequences built from them.

A value at position ``n`` of a heterogeneous sequence is wrapped as ``n``
layers of :class:`Tail` around a :class:`Head`.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Any, ClassVar, Iterator


class Conil:
    """The empty coproduct: it has no values and cannot be constructed."""

    def __new__(cls, *args: Any, **kwargs: Any) -> "Conil":
        raise TypeError("Conil has no values and cannot be constructed")


@total_ordering
@dataclass(frozen=True, eq=False)
class Cocons:
    """Either the head of a coproduct or its tail."""

    value: Any
    _rank: ClassVar[int] = 0

    def inner(self) -> Any:
        """Return the value held, unwrapping every nested layer."""
        value = self.value
        while isinstance(value, Cocons):
            value = value.value
        return value

    def __str__(self) -> str:
        return str(self.inner())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cocons):
            return NotImplemented
        return self._rank == other._rank and self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cocons):
            return NotImplemented
        if self._rank != other._rank:
            return self._rank < other._rank
        return self.value < other.value

    def __hash__(self) -> int:
        return hash((self._rank, self.value))


class Head(Cocons):
    """The first alternative of a coproduct."""

    _rank: ClassVar[int] = 0

    def __repr__(self) -> str:
        return f"Head({self.value!r})"


class Tail(Cocons):
    """Any alternative of a coproduct other than the first."""

    _rank: ClassVar[int] = 1

    def __repr__(self) -> str:
        return f"Tail({self.value!r})"


def _wrap(value: Any, depth: int) -> Cocons:
    wrapped: Cocons = Head(value)
    for _ in range(depth):
        wrapped = Tail(wrapped)
    return wrapped


def hiter(*args: Any) -> Iterator[Cocons]:
    """Yield each argument wrapped as the coproduct alternative of its place."""
    for depth, value in enumerate(args):
        yield _wrap(value, depth)


def hvec(*args: Any) -> list[Cocons]:
    """Return the arguments as a list of coproduct values."""
    return list(hiter(*args))


def harray(*args: Any) -> tuple[Cocons, ...]:
    """Return the arguments as a fixed-length tuple of coproduct values."""
    return tuple(hiter(*args))