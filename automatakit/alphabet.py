"""A set of symbols over which words are defined."""

from __future__ import annotations

from typing import Iterable, Iterator, Union

from automatakit.symbol import Symbol

SymbolLike = Union[Symbol, str]


def _as_symbol(value: SymbolLike) -> Symbol:
    return value if isinstance(value, Symbol) else Symbol(value)


class Alphabet:
    """An ordered set of symbols."""

    def __init__(self, symbols: Iterable[SymbolLike] = "") -> None:
        self._symbols: set[Symbol] = {_as_symbol(s) for s in symbols}

    def add(self, symbol: SymbolLike) -> None:
        """Add a symbol; the empty-word symbol is never part of an alphabet."""
        symbol = _as_symbol(symbol)
        if symbol.is_lambda():
            return
        self._symbols.add(symbol)

    def __contains__(self, symbol: object) -> bool:
        if isinstance(symbol, str):
            if len(symbol) != 1:
                return False
            symbol = Symbol(symbol)
        return symbol in self._symbols

    def __iter__(self) -> Iterator[Symbol]:
        return iter(sorted(self._symbols))

    def __len__(self) -> int:
        return len(self._symbols)

    def __repr__(self) -> str:
        return f"Alphabet({''.join(s.char for s in self)!r})"