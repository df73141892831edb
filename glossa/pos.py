"""Positions around a base character, and maps keyed by those positions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@total_ordering
class Position(Enum):
    """A place around a base character where a diacritic may be drawn."""

    TOP = 0
    LEFT = 1
    BOTTOM = 2
    RIGHT = 3

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.value < other.value


ALL_POSITIONS: tuple[Position, ...] = (
    Position.LEFT,
    Position.TOP,
    Position.BOTTOM,
    Position.RIGHT,
)
"""Every position, in the order in which maps are iterated and rendered."""

_FIELDS = {
    Position.TOP: "top",
    Position.LEFT: "left",
    Position.BOTTOM: "bottom",
    Position.RIGHT: "right",
}


@dataclass(order=True)
class TotalMap(Generic[T]):
    """A map holding exactly one value for every position."""

    top: T
    left: T
    bottom: T
    right: T

    @classmethod
    def from_fn(cls, function: Callable[[Position], T]) -> "TotalMap[T]":
        """Build a map by calling ``function`` once for every position."""
        return cls(
            top=function(Position.TOP),
            left=function(Position.LEFT),
            bottom=function(Position.BOTTOM),
            right=function(Position.RIGHT),
        )

    def map(self, mapper: Callable[[T], U]) -> "TotalMap[U]":
        """Return a new map with ``mapper`` applied to every value."""
        return self.map_with_pos(lambda _, value: mapper(value))

    def map_with_pos(self, mapper: Callable[[Position, T], U]) -> "TotalMap[U]":
        """Return a new map with ``mapper(position, value)`` for every entry."""
        return TotalMap(
            top=mapper(Position.TOP, self.top),
            left=mapper(Position.LEFT, self.left),
            bottom=mapper(Position.BOTTOM, self.bottom),
            right=mapper(Position.RIGHT, self.right),
        )

    def transpose(self) -> "Optional[TotalMap[T]]":
        """Return a copy of this map, or None if any of its values is None."""
        if any(self[position] is None for position in ALL_POSITIONS):
            return None
        return TotalMap(top=self.top, left=self.left, bottom=self.bottom, right=self.right)

    def items(self) -> Iterator[tuple[Position, T]]:
        """Yield ``(position, value)`` pairs in the order of ALL_POSITIONS."""
        for position in ALL_POSITIONS:
            yield position, self[position]

    def __getitem__(self, position: Position) -> T:
        return getattr(self, _FIELDS[position])

    def __setitem__(self, position: Position, value: T) -> None:
        setattr(self, _FIELDS[position], value)

    def __iter__(self) -> Iterator[Position]:
        return iter(ALL_POSITIONS)


class DuplicatePositionError(ValueError):
    """Raised when a position is inserted twice into a PartialMap."""

    def __init__(self, position: Position, index: int) -> None:
        super().__init__(f"position {position.name} is already stored at index {index}")
        self.position = position
        self.index = index


class PartialMapFullError(ValueError):
    """Raised when a PartialMap has no room for another entry."""


@total_ordering
class PartialMap(Generic[T]):
    """An ordered map from some positions to data, each position at most once.

    Iterating yields ``(position, data)`` entries in insertion order; the index
    of an entry is its place in that order.
    """

    CAPACITY = 4

    def __init__(self, entries: Iterable[tuple[Position, T]] = ()) -> None:
        self._entries: list[tuple[Position, T]] = []
        for position, data in entries:
            self.insert(position, data)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[tuple[Position, T]]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[tuple[Position, T]]:
        return reversed(self._entries)

    def __contains__(self, position: object) -> bool:
        return isinstance(position, Position) and self.to_index(position) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PartialMap):
            return NotImplemented
        return self._entries == other._entries

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PartialMap):
            return NotImplemented
        return self._entries < other._entries

    def __hash__(self) -> int:
        return hash(tuple(position for position, _ in self._entries))

    def __repr__(self) -> str:
        return f"PartialMap({self._entries!r})"

    def data(self, position: Position) -> Optional[T]:
        """Return the data stored for ``position``, or None."""
        index = self.to_index(position)
        return None if index is None else self.index_data(index)

    def index_position(self, index: int) -> Optional[Position]:
        """Return the position of the entry at ``index``, or None."""
        entry = self.index_entry(index)
        return None if entry is None else entry[0]

    def index_data(self, index: int) -> Optional[T]:
        """Return the data of the entry at ``index``, or None."""
        entry = self.index_entry(index)
        return None if entry is None else entry[1]

    def index_entry(self, index: int) -> Optional[tuple[Position, T]]:
        """Return the ``(position, data)`` entry at ``index``, or None."""
        if 0 <= index < len(self._entries):
            return self._entries[index]
        return None

    def to_index(self, position: Position) -> Optional[int]:
        """Return the index at which ``position`` is stored, or None."""
        for index, (stored, _) in enumerate(self._entries):
            if stored == position:
                return index
        return None

    def insert(self, position: Position, data: T) -> int:
        """Append a new entry and return its index."""
        existing = self.to_index(position)
        if existing is not None:
            raise DuplicatePositionError(position, existing)
        if len(self._entries) >= self.CAPACITY:
            raise PartialMapFullError("partial map is full")
        self._entries.append((position, data))
        return len(self._entries) - 1