"""Nondeterministic finite automata over hashable symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Generic, Hashable, Iterable, Sequence, TypeVar

from .dfa import _AutomatonBase, _feed

T = TypeVar("T", bound=Hashable)


@dataclass
class Automaton(_AutomatonBase, Generic[T]):
    """A nondeterministic automaton; states are integers."""

    transitions: dict[int, dict[T, set[int]]] = field(default_factory=dict)

    def start(self) -> Execution[T]:
        """Begin a run of this automaton at its initial state."""
        return Execution(self)

    def test(self, symbols: Iterable[T]) -> bool:
        """Return whether some path over the symbols ends in a final state."""
        return _feed(self.start(), symbols)._accepts()

    @classmethod
    def merge(cls, automatons: Sequence[Automaton[T]]) -> Automaton[T]:
        """Join automatons into one that shares a single initial state 0.

        Every other state is renumbered so that the automatons do not collide.
        """
        initial_state = 0
        final_states: set[int] = set()
        transitions: dict[int, dict[T, set[int]]] = {}
        fresh = count(1)

        for automaton in automatons:
            mapping = {automaton.initial_state: initial_state}

            def renumber(state: int) -> int:
                if state not in mapping:
                    mapping[state] = next(fresh)
                return mapping[state]

            final_states.update(renumber(state) for state in automaton.final_states)

            for current_state, next_states in automaton.transitions.items():
                merged_next = transitions.setdefault(renumber(current_state), {})
                for symbol, next_for_symbol in next_states.items():
                    targets = merged_next.setdefault(symbol, set())
                    targets.update(renumber(state) for state in next_for_symbol)

        return cls(initial_state, final_states, transitions)


class Execution(Generic[T]):
    """A run of a nondeterministic automaton, tracking every reachable state."""

    def __init__(self, automaton: Any) -> None:
        self.automaton = automaton
        self._states: set[int] = {automaton.initial_state}

    @property
    def current_states(self) -> frozenset[int]:
        """The states reached so far."""
        return frozenset(self._states)

    def step(self, symbol: T) -> None:
        """Move every current state along its transitions for ``symbol``."""
        self._states = {
            next_state
            for state in self._states
            for next_state in self._targets(state, symbol)
        }

    def _targets(self, state: int, symbol: T) -> Iterable[int]:
        return self.automaton.transitions.get(state, {}).get(symbol, ())

    def _accepts(self) -> bool:
        return not self._states.isdisjoint(self.automaton.final_states)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(states={sorted(self._states)!r})"