"""Finite automata, lambda elimination, subset construction and regular expressions."""

__version__ = "0.1.0"

__all__ = [
    "alphabet",
    "automaton",
    "dfa",
    "nfa",
    "regex",
    "state_mapper",
    "states",
    "symbol",
    "transitions",
    "word",
]