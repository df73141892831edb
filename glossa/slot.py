"""Slots of diacritics around a base character, and per-character hints."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Generic, Optional, TypeVar

from glossa.pos import Position, TotalMap

if TYPE_CHECKING:
    from glossa.cluster import Diacritic

D = TypeVar("D", bound="Diacritic")


class Hint(Enum):
    """Whether a slot around a character is free or partly obstructed."""

    REGULAR = "regular"
    OBSTRUCTED = "obstructed"


@dataclass
class Slot(Generic[D]):
    """The diacritics placed at one position around a character."""

    diacritics: list[D] = field(default_factory=list)

    def render(self, position: Position) -> str:
        """Concatenate the renderings of these diacritics at ``position``."""
        rendered = (diacritic.renderings().data(position) for diacritic in self.diacritics)
        return "".join(text for text in rendered if text is not None)


_FREE = frozenset("aɑbcdeɛhikmnoɔpqrɹsuvʋwɰxz")
_TOP_OBSTRUCTED = frozenset("gjŋy")
_BOTTOM_OBSTRUCTED = frozenset("flt")


def _obstructed_at(obstructed: Optional[Position]) -> TotalMap[Hint]:
    return TotalMap.from_fn(
        lambda position: Hint.OBSTRUCTED if position is obstructed else Hint.REGULAR
    )


def hints(character: str) -> Optional[TotalMap[Hint]]:
    """Return the slot hints for a known base character, or None."""
    if character in _FREE:
        return _obstructed_at(None)
    if character in _TOP_OBSTRUCTED:
        return _obstructed_at(Position.TOP)
    if character in _BOTTOM_OBSTRUCTED:
        return _obstructed_at(Position.BOTTOM)
    return None