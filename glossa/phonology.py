"""Phonemes, their allophones, and the conditions under which they occur."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import total_ordering
from typing import Any, ClassVar, Union

from glossa.phone import Phone


def _sort_key(item: Any) -> tuple[int, tuple[Any, ...]]:
    return item._rank, tuple(getattr(item, f.name) for f in fields(item))


@total_ordering
class _Value:
    """Base of the values a condition may test for."""

    _rank: ClassVar[int] = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _Value):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


@dataclass(frozen=True)
class Phoneme(_Value):
    """A phoneme, identified by its broad phone."""

    broad: Phone
    _rank: ClassVar[int] = 0


@dataclass(frozen=True)
class Allophone(_Value):
    """A concrete phone realising some phoneme."""

    phone: Phone
    _rank: ClassVar[int] = 1


Value = Union[Phoneme, Allophone]


@total_ordering
class Cond:
    """Base of the conditions under which an allophone occurs."""

    _rank: ClassVar[int] = 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Cond):
            return NotImplemented
        return _sort_key(self) < _sort_key(other)


@dataclass(frozen=True)
class Always(Cond):
    """A condition that always holds."""

    _rank: ClassVar[int] = 0


@dataclass(frozen=True)
class Never(Cond):
    """A condition that never holds."""

    _rank: ClassVar[int] = 1


@dataclass(frozen=True)
class Eq(Cond):
    """Holds where the given value occurs."""

    value: Value
    _rank: ClassVar[int] = 2


@dataclass(frozen=True)
class Neq(Cond):
    """Holds where the given value does not occur."""

    value: Value
    _rank: ClassVar[int] = 3


@dataclass(frozen=True)
class Not(Cond):
    """The negation of a condition."""

    cond: Cond
    _rank: ClassVar[int] = 4


@dataclass(frozen=True)
class _Many(Cond):
    conds: tuple[Cond, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "conds", tuple(self.conds))


@dataclass(frozen=True)
class AnyOf(_Many):
    """Holds where any of the conditions holds."""

    _rank: ClassVar[int] = 5


@dataclass(frozen=True)
class AllOf(_Many):
    """Holds where all of the conditions hold."""

    _rank: ClassVar[int] = 6


@dataclass(frozen=True)
class Seq(_Many):
    """Holds where the conditions hold one after another."""

    _rank: ClassVar[int] = 7


@dataclass(frozen=True)
class Named(Cond):
    """A condition carrying a name."""

    name: str
    cond: Cond
    _rank: ClassVar[int] = 8


@total_ordering
@dataclass(eq=False)
class PhonemeSpec:
    """A phoneme together with its allophones, in order of declaration."""

    phoneme: Phoneme
    allophones: dict[Phone, Cond] = field(default_factory=dict)

    def _key(self) -> tuple[Phoneme, list[tuple[Phone, Cond]]]:
        return self.phoneme, list(self.allophones.items())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PhonemeSpec):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PhonemeSpec):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        items = tuple(self.allophones.items())
        return hash((self.phoneme, items, len(items)))