"""Placement of diacritics around a base character."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import product
from typing import Generic, Iterable, Optional, Protocol, Sequence, TypeVar

from glossa.pos import ALL_POSITIONS, PartialMap, Position, TotalMap
from glossa.slot import Hint, Slot


class Diacritic(Protocol):
    """Anything that can be drawn at one or more positions around a character."""

    def renderings(self) -> PartialMap[str]:
        """Return the text for each position, most preferred first."""
        ...


D = TypeVar("D", bound=Diacritic)


class NoSolutionError(ValueError):
    """Raised when the diacritics cannot all be placed."""


def _score(
    assignment: Sequence[Position],
    renderings: Sequence[PartialMap[str]],
    hints: TotalMap[Hint],
) -> Optional[int]:
    """Cost of an assignment of diacritics to positions; lower is better."""
    mean = (len(renderings) + 2) // 4
    counts = dict.fromkeys(ALL_POSITIONS, 0)
    points = 0
    for rendering, position in zip(renderings, assignment):
        preference = rendering.to_index(position)
        if preference is None:
            return None
        points += 2 * preference
        counts[position] += 1
    for position, count in counts.items():
        if hints[position] is Hint.OBSTRUCTED:
            points += count
        points += 4 * abs(count - mean)
    return points


def solve(hints: TotalMap[Hint], diacritics: Iterable[D]) -> TotalMap[Slot[D]]:
    """Place every diacritic in the slot that gives the best overall layout."""
    diacritics = list(diacritics)
    renderings = [diacritic.renderings() for diacritic in diacritics]

    best: Optional[tuple[Position, ...]] = None
    best_points: Optional[int] = None
    for assignment in product(ALL_POSITIONS, repeat=len(diacritics)):
        points = _score(assignment, renderings, hints)
        if points is not None and (best_points is None or points < best_points):
            best, best_points = assignment, points

    if best is None:
        raise NoSolutionError("diacritics cannot be placed around the character")

    chosen = best
    return TotalMap.from_fn(
        lambda position: Slot(
            [diacritic for diacritic, placed in zip(diacritics, chosen) if placed is position]
        )
    )


@dataclass
class GraphemeCluster(Generic[D]):
    """A base character with its diacritics placed in slots."""

    character: str
    slots: TotalMap[Slot[D]]

    @classmethod
    def solve(
        cls, character: str, hints: TotalMap[Hint], diacritics: Iterable[D]
    ) -> "GraphemeCluster[D]":
        """Build a cluster for ``character`` with the best diacritic layout."""
        return cls(character, solve(hints, diacritics))

    def __str__(self) -> str:
        return self.character + "".join(
            slot.render(position) for position, slot in self.slots.items()
        )


@dataclass
class Symbol(Generic[D]):
    """A base character whose left slot is written around it."""

    character: str
    slots: TotalMap[Slot[D]]

    def __str__(self) -> str:
        left = self.slots.left
        return (
            left.render(Position.LEFT)
            + self.character
            + left.render(Position.TOP)
            + left.render(Position.BOTTOM)
            + left.render(Position.RIGHT)
        )