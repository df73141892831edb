"""Diacritic placement, phonetic transcription, phonology, finite automata and coproducts."""

__version__ = "0.1.0"