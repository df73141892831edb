"""Consonants and how they are written."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

from glossa.cluster import GraphemeCluster
from glossa.diacritic import PhoneticDiacritic
from glossa.features import Cavity, Phonation
from glossa.slot import hints


class Place(IntEnum):
    """Where the airflow is constricted."""

    LABIAL = 1
    ALVEOLAR = 2
    VELAR = 3


class Manner(IntEnum):
    """How strongly the airflow is constricted."""

    PLOSIVE = 1
    FRICATIVE = 2
    APPROXIMANT = 3

    def try_lenit(self) -> Optional["Manner"]:
        """Return the next weaker manner, or None if there is none."""
        return _LENITED.get(self)

    def try_fortify(self) -> Optional["Manner"]:
        """Return the next stronger manner, or None if there is none."""
        return _FORTIFIED.get(self)

    def lenit(self) -> "Manner":
        """Return the next weaker manner, or this one if already the weakest."""
        lenited = self.try_lenit()
        return self if lenited is None else lenited

    def fortify(self) -> "Manner":
        """Return the next stronger manner, or this one if already the strongest."""
        fortified = self.try_fortify()
        return self if fortified is None else fortified


_LENITED = {Manner.PLOSIVE: Manner.FRICATIVE, Manner.FRICATIVE: Manner.APPROXIMANT}
_FORTIFIED = {Manner.FRICATIVE: Manner.PLOSIVE, Manner.APPROXIMANT: Manner.FRICATIVE}

_PLOSIVES = {
    (Place.LABIAL, Phonation.VOICELESS): "p",
    (Place.LABIAL, Phonation.VOICED): "b",
    (Place.ALVEOLAR, Phonation.VOICELESS): "t",
    (Place.ALVEOLAR, Phonation.VOICED): "d",
    (Place.VELAR, Phonation.VOICELESS): "k",
    (Place.VELAR, Phonation.VOICED): "g",
}
_NASALS = {Place.LABIAL: "m", Place.ALVEOLAR: "n", Place.VELAR: "ŋ"}
_FRICATIVES = {
    (Place.LABIAL, Phonation.VOICELESS): "ɸ",
    (Place.LABIAL, Phonation.VOICED): "β",
    (Place.ALVEOLAR, Phonation.VOICELESS): "s",
    (Place.ALVEOLAR, Phonation.VOICED): "z",
    (Place.VELAR, Phonation.VOICELESS): "x",
    (Place.VELAR, Phonation.VOICED): "ɣ",
}
_APPROXIMANTS = {Place.LABIAL: "ʋ", Place.ALVEOLAR: "ɹ", Place.VELAR: "ɰ"}


@dataclass(frozen=True, order=True)
class Consonant:
    """A consonant described by its articulatory features."""

    place: Place
    manner: Manner
    phonation: Phonation
    cavity: Cavity
    syllabic: bool

    def _base(self) -> tuple[str, list[PhoneticDiacritic]]:
        diacritics: list[PhoneticDiacritic] = []
        voiceless = self.phonation is Phonation.VOICELESS
        nasal = self.cavity is Cavity.NASAL
        if self.manner is Manner.PLOSIVE:
            if not nasal:
                return _PLOSIVES[(self.place, self.phonation)], diacritics
            if voiceless:
                diacritics.append(PhoneticDiacritic.VOICELESS)
            return _NASALS[self.place], diacritics
        if self.manner is Manner.FRICATIVE:
            if nasal:
                diacritics.append(PhoneticDiacritic.NASALIZED)
            return _FRICATIVES[(self.place, self.phonation)], diacritics
        if voiceless:
            diacritics.append(PhoneticDiacritic.VOICELESS)
        if nasal:
            diacritics.append(PhoneticDiacritic.NASALIZED)
        return _APPROXIMANTS[self.place], diacritics

    def grapheme_cluster(self) -> GraphemeCluster[PhoneticDiacritic]:
        """Return the base letter and diacritics that write this consonant.

        Raises ValueError when the base letter has no known slot hints.
        """
        character, diacritics = self._base()
        if self.syllabic:
            diacritics.append(PhoneticDiacritic.SYLLABIC)
        character_hints = hints(character)
        if character_hints is None:
            raise ValueError(f"no slot hints known for {character!r}")
        return GraphemeCluster.solve(character, character_hints, diacritics)

    def __str__(self) -> str:
        return str(self.grapheme_cluster())