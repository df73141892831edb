"""Conversion of nondeterministic automata into deterministic ones."""

from __future__ import annotations

from typing import Hashable, TypeVar

from glossa import dfa, nfa

T = TypeVar("T", bound=Hashable)


class _NfaToDfa:
    """Bookkeeping for building DFA states out of sets of NFA states."""

    def __init__(self, initial_nfa_state: int) -> None:
        self._state_count = 1
        self._set_to_dfa: dict[frozenset[int], int] = {}
        self._nfa_to_dfa_set: dict[int, set[int]] = {initial_nfa_state: {0}}
        self._transitions: dict[int, dict[Hashable, int]] = {}

    def _dfa_state_for(self, nfa_set: frozenset[int]) -> int:
        dfa_state = self._set_to_dfa.get(nfa_set)
        if dfa_state is None:
            dfa_state = self._state_count
            self._state_count += 1
            self._set_to_dfa[nfa_set] = dfa_state
        for nfa_state in nfa_set:
            self._nfa_to_dfa_set.setdefault(nfa_state, set()).add(dfa_state)
        return dfa_state

    def process_transitions(self, transitions: dict[int, dict[T, set[int]]]) -> None:
        for current_state, next_states in transitions.items():
            mapped = {
                symbol: self._dfa_state_for(frozenset(next_for_symbol))
                for symbol, next_for_symbol in next_states.items()
            }
            self._transitions.setdefault(current_state, {}).update(mapped)

    def final_states(self, nfa_final_states: set[int]) -> set[int]:
        return {
            dfa_state
            for final_state in nfa_final_states
            for dfa_state in self._nfa_to_dfa_set.get(final_state, ())
        }

    def dfa_transitions(self) -> dict[int, dict[Hashable, int]]:
        result: dict[int, dict[Hashable, int]] = {}
        for current_state, next_states in self._transitions.items():
            dfa_states = self._nfa_to_dfa_set.get(current_state)
            if dfa_states is None:
                raise ValueError(
                    f"state {current_state} has transitions but is never reached"
                )
            for dfa_state in sorted(dfa_states):
                result.setdefault(dfa_state, {}).update(next_states)
        return result


def nfa_to_dfa(automaton: nfa.Automaton[T]) -> dfa.Automaton[T]:
    """Build a deterministic automaton from a nondeterministic one.

    The resulting automaton starts in state 0.
    """
    compiler = _NfaToDfa(automaton.initial_state)
    compiler.process_transitions(automaton.transitions)
    final_states = compiler.final_states(automaton.final_states)
    transitions = compiler.dfa_transitions()
    return dfa.Automaton(
        initial_state=0, final_states=final_states, transitions=transitions
    )