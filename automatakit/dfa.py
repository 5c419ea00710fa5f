"""Deterministic finite automata."""

from __future__ import annotations

from typing import Any, Iterable, Union

from automatakit.alphabet import Alphabet
from automatakit.automaton import AcceptCode, Automaton
from automatakit.states import State, States
from automatakit.transitions import DFATransitions, Transition
from automatakit.word import Word


class DFA(Automaton):
    """A deterministic finite automaton."""

    def __init__(
        self,
        transitions: Union[DFATransitions, Iterable[Any]],
        initial: Union[State, str],
        accept: Any = (),
    ) -> None:
        if isinstance(transitions, DFATransitions):
            moves = list(transitions)
        else:
            moves = sorted(
                {t if isinstance(t, Transition) else Transition(*t) for t in transitions}
            )
        self.transitions = DFATransitions(moves)
        self.initial = initial if isinstance(initial, State) else State(initial)
        self.accept = accept if isinstance(accept, States) else States(accept)

        self.alphabet = Alphabet()
        states = {self.initial, *self.accept}
        for move in moves:
            states.update((move.source, move.target))
            self.alphabet.add(move.symbol)
        self.states = States(states)

    def accepts(self, word: Union[Word, str]) -> AcceptCode:
        word = self._fresh_word(word)
        if not word.defined_over(self.alphabet):
            return AcceptCode.ABORT
        current = self.initial
        while len(word):
            symbol = word.process_symbol()
            if not self.transitions.has(current, symbol):
                return AcceptCode.ABORT
            current = self.transitions.get(current, symbol)
        return AcceptCode.ACCEPTED if current in self.accept else AcceptCode.DENIED

    def __str__(self) -> str:
        return str(self.transitions)