"""Articulatory features shared by vowels and consonants."""

from __future__ import annotations

from enum import IntEnum


class Phonation(IntEnum):
    """Whether the vocal folds vibrate."""

    VOICELESS = 1
    VOICED = 2


class Cavity(IntEnum):
    """Where the airflow resonates."""

    NASAL = 1
    ORAL = 2