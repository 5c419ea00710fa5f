"""Nondeterministic finite automata with lambda moves, and their conversions."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Iterable, Union

from automatakit.alphabet import Alphabet
from automatakit.automaton import AcceptCode, Automaton
from automatakit.dfa import DFA
from automatakit.state_mapper import StateMapper
from automatakit.states import State, States
from automatakit.symbol import Symbol
from automatakit.transitions import NFATransitions, Transition
from automatakit.word import Word

_LAMBDA = Symbol(Symbol.LAMBDA)


@dataclass(frozen=True)
class NFAFragment:
    """A partial automaton: its transitions, entry state and exit states."""

    transitions: NFATransitions
    initial: State
    accept: States = field(default_factory=States)


class NFA(Automaton):
    """A nondeterministic finite automaton that may take lambda moves."""

    def __init__(
        self,
        transitions: Union[NFATransitions, Iterable[Any]],
        initial: Union[State, str],
        accept: Any = (),
    ) -> None:
        self.transitions = NFATransitions(transitions)
        self.initial = initial if isinstance(initial, State) else State(initial)
        self.accept = accept if isinstance(accept, States) else States(accept)

        self.alphabet = Alphabet()
        states = {self.initial, *self.accept}
        for move in self.transitions:
            states.add(move.source)
            states.update(move.target)
            self.alphabet.add(move.symbol)
        self.states = States(states)

    @classmethod
    def from_fragment(cls, fragment: NFAFragment) -> NFA:
        return cls(fragment.transitions, fragment.initial, fragment.accept)

    def lambda_closure(self, states: Any) -> States:
        """All states reachable from the given ones by lambda moves alone."""
        start = states if isinstance(states, States) else States(states)
        closure: set[State] = set()
        pending = list(start)
        while pending:
            state = pending.pop()
            if state in closure:
                continue
            closure.add(state)
            if self.transitions.has(state, _LAMBDA):
                pending.extend(self.transitions.get(state, _LAMBDA))
        return States(closure)

    def _eliminate_lambda(self, state: State, symbol: Symbol) -> States:
        reached: set[State] = set()
        for member in self.lambda_closure(state):
            if self.transitions.has(member, symbol):
                reached.update(self.transitions.get(member, symbol))
        return self.lambda_closure(reached)

    def _reaches_accept(self, state: State) -> bool:
        return any(member in self.accept for member in self.lambda_closure(state))

    def to_regular_nfa(self) -> NFA:
        """An equivalent automaton without lambda moves."""
        moves = []
        for state in self.states:
            for symbol in self.alphabet:
                targets = self._eliminate_lambda(state, symbol)
                if len(targets):
                    moves.append(Transition(state, symbol, targets))
        accept = [state for state in self.states if self._reaches_accept(state)]
        return NFA(moves, self.initial, accept)

    def to_dfa(self) -> DFA:
        """An equivalent deterministic automaton, built by subset construction."""
        regular = self.to_regular_nfa()
        initial = self.lambda_closure(regular.initial)

        names = StateMapper()
        names.add(initial)
        seen: set[States] = set()
        moves: list[Transition] = []
        pending: deque[States] = deque([initial])

        while pending:
            current = pending.popleft()
            if current in seen:
                continue
            seen.add(current)
            names.add(current)

            for symbol in regular.alphabet:
                reached: set[State] = set()
                for state in current:
                    if regular.transitions.has(state, symbol):
                        reached.update(regular.transitions.get(state, symbol))
                result = States(reached)
                if result not in seen and not names.has(result):
                    names.add(result)
                    pending.append(result)
                moves.append(Transition(names.get(current), symbol, names.get(result)))

        accepting = [
            names.get(group)
            for group in seen
            if any(state in self.accept for state in group)
        ]
        return DFA(moves, names.get(initial), accepting)

    def accepts(self, word: Union[Word, str]) -> AcceptCode:
        word = self._fresh_word(word)
        if not word.defined_over(self.alphabet):
            return AcceptCode.ABORT

        current = self.lambda_closure(self.initial)
        while len(word):
            symbol = word.process_symbol()
            reached: set[State] = set()
            moved = False
            for state in current:
                if self.transitions.has(state, symbol):
                    reached.update(self.transitions.get(state, symbol))
                    moved = True
            if not moved:
                return AcceptCode.ABORT
            current = self.lambda_closure(reached)

        if any(state in self.accept for state in current):
            return AcceptCode.ACCEPTED
        return AcceptCode.DENIED

    def __str__(self) -> str:
        return (
            f"Defined states: {self.states}\n"
            f"Initial state: {self.initial}\n"
            f"Accept states: {self.accept}\n"
            "Transition table:\n"
            f"{self.transitions}"
        )