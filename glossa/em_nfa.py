"""Nondeterministic finite automata with empty moves."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterable, TypeVar

from .dfa import _AutomatonBase, _feed
from .nfa import Execution as _SetExecution

T = TypeVar("T", bound=Hashable)


@dataclass
class TransitionOutput(Generic[T]):
    """Where a state leads: without input, and for each symbol."""

    empty: set[int] = field(default_factory=set)
    symbols: dict[T, set[int]] = field(default_factory=dict)


@dataclass
class Automaton(_AutomatonBase, Generic[T]):
    """A nondeterministic automaton with empty moves; states are integers."""

    transitions: dict[int, TransitionOutput[T]] = field(default_factory=dict)

    def start(self) -> Execution[T]:
        """Begin a run at the initial state and everything it reaches freely."""
        return Execution(self)

    def test(self, symbols: Iterable[T]) -> bool:
        """Return whether some path over the symbols, empty moves included, ends in a final state."""
        return _feed(self.start(), symbols)._accepts()


class Execution(_SetExecution[T]):
    """A run of an automaton with empty moves, closed under those moves."""

    def __init__(self, automaton: Automaton[T]) -> None:
        super().__init__(automaton)
        self._follow_empty_moves()

    def step(self, symbol: T) -> None:
        """Move along ``symbol`` from every current state, then the empty moves."""
        super().step(symbol)
        self._follow_empty_moves()

    def _targets(self, state: int, symbol: T) -> Iterable[int]:
        output = self.automaton.transitions.get(state)
        return () if output is None else output.symbols.get(symbol, ())

    def _follow_empty_moves(self) -> None:
        transitions = self.automaton.transitions
        pending = list(self._states)
        while pending:
            output = transitions.get(pending.pop())
            if output is None:
                continue
            for next_state in output.empty - self._states:
                self._states.add(next_state)
                pending.append(next_state)