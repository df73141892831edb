"""Vowels and how they are written."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from glossa.cluster import GraphemeCluster
from glossa.diacritic import PhoneticDiacritic
from glossa.features import Cavity, Phonation
from glossa.slot import hints


class Height(IntEnum):
    """How open the mouth is."""

    OPEN = 1
    MID = 2
    CLOSE = 3


class Frontness(IntEnum):
    """How far forward the tongue is."""

    FRONT = 1
    CENTRAL = 2
    BACK = 3


class Roundedness(IntEnum):
    """Whether the lips are rounded."""

    UNROUNDED = 1
    ROUNDED = 2


_D = PhoneticDiacritic

_BASES: dict[
    tuple[Height, Frontness, Roundedness], tuple[str, tuple[PhoneticDiacritic, ...]]
] = {
    (Height.OPEN, Frontness.FRONT, Roundedness.UNROUNDED): ("a", ()),
    (Height.OPEN, Frontness.FRONT, Roundedness.ROUNDED): ("ɶ", ()),
    (Height.OPEN, Frontness.CENTRAL, Roundedness.UNROUNDED): ("a", (_D.CENTRALIZED,)),
    (Height.OPEN, Frontness.CENTRAL, Roundedness.ROUNDED): ("ɶ", (_D.CENTRALIZED,)),
    (Height.OPEN, Frontness.BACK, Roundedness.UNROUNDED): ("ɑ", ()),
    (Height.OPEN, Frontness.BACK, Roundedness.ROUNDED): ("ɒ", ()),
    (Height.MID, Frontness.FRONT, Roundedness.UNROUNDED): ("e", (_D.LOWERED,)),
    (Height.MID, Frontness.FRONT, Roundedness.ROUNDED): ("ø", (_D.LOWERED,)),
    (Height.MID, Frontness.CENTRAL, Roundedness.UNROUNDED): ("ə", ()),
    (Height.MID, Frontness.CENTRAL, Roundedness.ROUNDED): ("ə", (_D.LABIALIZED,)),
    (Height.MID, Frontness.BACK, Roundedness.UNROUNDED): ("ɤ", (_D.LOWERED,)),
    (Height.MID, Frontness.BACK, Roundedness.ROUNDED): ("o", (_D.LOWERED,)),
    (Height.CLOSE, Frontness.FRONT, Roundedness.UNROUNDED): ("i", ()),
    (Height.CLOSE, Frontness.FRONT, Roundedness.ROUNDED): ("y", ()),
    (Height.CLOSE, Frontness.CENTRAL, Roundedness.UNROUNDED): ("ɨ", ()),
    (Height.CLOSE, Frontness.CENTRAL, Roundedness.ROUNDED): ("ʉ", ()),
    (Height.CLOSE, Frontness.BACK, Roundedness.UNROUNDED): ("ɯ", ()),
    (Height.CLOSE, Frontness.BACK, Roundedness.ROUNDED): ("u", ()),
}


@dataclass(frozen=True, order=True)
class Vowel:
    """A vowel described by its articulatory features."""

    height: Height
    frontness: Frontness
    roundedness: Roundedness
    phonation: Phonation
    cavity: Cavity
    syllabic: bool

    def grapheme_cluster(self) -> GraphemeCluster[PhoneticDiacritic]:
        """Return the base letter and diacritics that write this vowel.

        Raises ValueError when the base letter has no known slot hints.
        """
        character, marks = _BASES[(self.height, self.frontness, self.roundedness)]
        diacritics = list(marks)
        if self.cavity is Cavity.NASAL:
            diacritics.append(PhoneticDiacritic.NASALIZED)
        if self.phonation is Phonation.VOICELESS:
            diacritics.append(PhoneticDiacritic.VOICELESS)
        if not self.syllabic:
            diacritics.append(PhoneticDiacritic.NON_SYLLABIC)
        character_hints = hints(character)
        if character_hints is None:
            raise ValueError(f"no slot hints known for {character!r}")
        return GraphemeCluster.solve(character, character_hints, diacritics)

    def __str__(self) -> str:
        return str(self.grapheme_cluster())