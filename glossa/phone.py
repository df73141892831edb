"""Phones: either a vowel or a consonant."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Union

from glossa.consonant import Consonant
from glossa.features import Cavity, Phonation
from glossa.vowel import Vowel


@total_ordering
@dataclass(frozen=True)
class Phone:
    """A speech sound; consonants order before vowels."""

    sound: Union[Consonant, Vowel]

    def _sort_key(self) -> tuple[bool, Union[Consonant, Vowel]]:
        return isinstance(self.sound, Vowel), self.sound

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Phone):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def syllabic(self) -> bool:
        """Whether the phone forms a syllable nucleus."""
        return self.sound.syllabic

    def cavity(self) -> Cavity:
        """The resonating cavity of the phone."""
        return self.sound.cavity

    def phonation(self) -> Phonation:
        """The phonation of the phone."""
        return self.sound.phonation

    def __str__(self) -> str:
        return str(self.sound)