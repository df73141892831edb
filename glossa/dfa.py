"""Deterministic finite automata over hashable symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Hashable, Iterable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class UnrecognizedInput(LookupError):
    """Raised when the input has led the automaton to no state at all."""

    def __init__(self) -> None:
        super().__init__("input not recognized by the automaton")


@dataclass
class _AutomatonBase:
    """States shared by every kind of finite automaton: integers."""

    initial_state: int
    final_states: set[int] = field(default_factory=set)


def _feed(execution: Any, symbols: Iterable[Any]) -> Any:
    """Step ``execution`` through every symbol and return it."""
    for symbol in symbols:
        execution.step(symbol)
    return execution


@dataclass
class Automaton(_AutomatonBase, Generic[T]):
    """A deterministic automaton; states are integers."""

    transitions: dict[int, dict[T, int]] = field(default_factory=dict)

    def start(self) -> Execution[T]:
        """Begin a run of this automaton at its initial state."""
        return Execution(self)

    def test(self, symbols: Iterable[T]) -> bool:
        """Return whether the automaton accepts the whole sequence of symbols."""
        return _feed(self.start(), symbols)._accepts()


class Execution(Generic[T]):
    """A run of a deterministic automaton, fed one symbol at a time."""

    def __init__(self, automaton: Automaton[T]) -> None:
        self.automaton = automaton
        self._state: Optional[int] = automaton.initial_state

    def current_state(self) -> int:
        """Return the state reached so far, or raise UnrecognizedInput."""
        if self._state is None:
            raise UnrecognizedInput()
        return self._state

    def step(self, symbol: T) -> None:
        """Follow the transition for ``symbol``; once stuck, stay stuck."""
        if self._state is None:
            return
        self._state = self.automaton.transitions.get(self._state, {}).get(symbol)

    def _accepts(self) -> bool:
        return self._state is not None and self._state in self.automaton.final_states

    def __repr__(self) -> str:
        return f"Execution(state={self._state!r})"