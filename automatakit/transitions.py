"""Transitions and transition tables for deterministic and nondeterministic automata."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Union

from automatakit.states import State, States
from automatakit.symbol import Symbol

_LAMBDA_GLYPH = "λ"


def _as_source(value: Any) -> Any:
    return State(value) if isinstance(value, str) else value


def _as_symbol(value: Union[Symbol, str]) -> Symbol:
    return value if isinstance(value, Symbol) else Symbol(value)


def _as_target(value: Any) -> Any:
    if isinstance(value, str):
        return State(value)
    if isinstance(value, (list, tuple, set, frozenset)):
        return States(value)
    return value


@dataclass(frozen=True, order=True)
class Transition:
    """A single move: from a source, on a symbol, to a target."""

    source: Any
    symbol: Symbol
    target: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", _as_source(self.source))
        object.__setattr__(self, "symbol", _as_symbol(self.symbol))
        object.__setattr__(self, "target", _as_target(self.target))

    def __str__(self) -> str:
        label = _LAMBDA_GLYPH if self.symbol.is_lambda() else str(self.symbol)
        return f"{self.source} --{label}--> {self.target}"


def _key(source: Any, symbol: Union[Symbol, str]) -> tuple[Any, Symbol]:
    return _as_source(source), _as_symbol(symbol)


def _as_transitions(transitions: Iterable[Any]) -> Iterator[Transition]:
    for item in transitions:
        yield item if isinstance(item, Transition) else Transition(*item)


def _lookup(table: dict, source: Any, symbol: Union[Symbol, str]) -> Any:
    try:
        return table[_key(source, symbol)]
    except KeyError:
        raise KeyError(f"no transition from {source} on {str(symbol)!r}") from None


def _ordered(table: dict) -> Iterator[Transition]:
    for source, symbol in sorted(table):
        yield Transition(source, symbol, table[(source, symbol)])


def _render(transitions: Iterable[Transition]) -> str:
    return "".join(f"{transition}\n" for transition in transitions)


class DFATransitions:
    """Deterministic table: each (state, symbol) leads to one state."""

    def __init__(self, transitions: Iterable[Any] = ()) -> None:
        self._table: dict[tuple[Any, Symbol], Any] = {}
        self.update(transitions)

    def add(self, source: Any, symbol: Union[Symbol, str], target: Any) -> None:
        """Add a transition unless its (source, symbol) pair is already defined."""
        key = _key(source, symbol)
        if key in self._table:
            return
        self._table[key] = _as_target(target)

    def update(self, transitions: Iterable[Any]) -> None:
        """Add every transition from an iterable of transitions or triples."""
        for transition in _as_transitions(transitions):
            self.add(transition.source, transition.symbol, transition.target)

    def has(self, source: Any, symbol: Union[Symbol, str]) -> bool:
        return _key(source, symbol) in self._table

    def get(self, source: Any, symbol: Union[Symbol, str]) -> Any:
        return _lookup(self._table, source, symbol)

    def __iter__(self) -> Iterator[Transition]:
        return _ordered(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __str__(self) -> str:
        return _render(self)


class NFATransitions:
    """Nondeterministic table: each (state, symbol) leads to a set of states."""

    def __init__(self, transitions: Iterable[Any] = ()) -> None:
        self._table: dict[tuple[Any, Symbol], States] = {}
        self.update(transitions)

    def add(self, source: Any, symbol: Union[Symbol, str], target: Any) -> None:
        """Add a transition, merging its targets with any already defined."""
        key = _key(source, symbol)
        targets = target if isinstance(target, States) else States(target)
        existing = self._table.get(key)
        self._table[key] = targets if existing is None else existing.unite(targets)

    def update(self, transitions: Iterable[Any]) -> None:
        """Add every transition from an iterable of transitions or triples."""
        for transition in _as_transitions(transitions):
            self.add(transition.source, transition.symbol, transition.target)

    def has(self, source: Any, symbol: Union[Symbol, str]) -> bool:
        return _key(source, symbol) in self._table

    def get(self, source: Any, symbol: Union[Symbol, str]) -> States:
        return _lookup(self._table, source, symbol)

    def __iter__(self) -> Iterator[Transition]:
        return _ordered(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def __str__(self) -> str:
        return _render(self)