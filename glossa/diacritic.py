"""Diacritics of the phonetic alphabet and where each may be drawn."""

from __future__ import annotations

from enum import Enum, auto

from glossa.pos import PartialMap, Position


class PhoneticDiacritic(Enum):
    """A phonetic diacritic mark."""

    NASALIZED = auto()
    LOWERED = auto()
    VOICED = auto()
    VOICELESS = auto()
    CENTRALIZED = auto()
    NON_SYLLABIC = auto()
    SYLLABIC = auto()
    LABIALIZED = auto()

    def renderings(self) -> PartialMap[str]:
        """Return the text of this mark at each position, most preferred first."""
        return PartialMap(_RENDERINGS[self])


_RENDERINGS: dict[PhoneticDiacritic, tuple[tuple[Position, str], ...]] = {
    PhoneticDiacritic.NASALIZED: ((Position.TOP, "\u0303"),),
    PhoneticDiacritic.LOWERED: (
        (Position.BOTTOM, "\u031e"),
        (Position.RIGHT, "\u02d5"),
    ),
    PhoneticDiacritic.VOICED: ((Position.BOTTOM, "\u032c"),),
    PhoneticDiacritic.VOICELESS: (
        (Position.BOTTOM, "\u0325"),
        (Position.TOP, "\u030a"),
    ),
    PhoneticDiacritic.CENTRALIZED: ((Position.TOP, "\u0308"),),
    PhoneticDiacritic.NON_SYLLABIC: (
        (Position.BOTTOM, "\u032f"),
        (Position.TOP, "\u0311"),
    ),
    PhoneticDiacritic.SYLLABIC: (
        (Position.BOTTOM, "\u0329"),
        (Position.TOP, "\u030d"),
    ),
    PhoneticDiacritic.LABIALIZED: ((Position.RIGHT, "ʷ"),),
}