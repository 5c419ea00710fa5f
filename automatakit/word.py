"""Words: sequences of symbols consumed one at a time."""

from __future__ import annotations

from collections import deque
from typing import Iterable, Union

from automatakit.alphabet import Alphabet
from automatakit.symbol import Symbol

SymbolLike = Union[Symbol, str]


class Word:
    """A word whose symbols are consumed from the front."""

    def __init__(self, symbols: Iterable[SymbolLike] = "") -> None:
        self._symbols: deque[Symbol] = deque(
            s if isinstance(s, Symbol) else Symbol(s) for s in symbols
        )

    def process_symbol(self) -> Symbol:
        """Remove and return the first remaining symbol."""
        if not self._symbols:
            raise IndexError("cannot consume an empty word")
        return self._symbols.popleft()

    def __len__(self) -> int:
        return len(self._symbols)

    def defined_over(self, alphabet: Alphabet) -> bool:
        """Whether every remaining symbol belongs to the alphabet."""
        return all(symbol in alphabet for symbol in self._symbols)

    def __str__(self) -> str:
        return "".join(symbol.char for symbol in self._symbols)

    def __repr__(self) -> str:
        return f"Word({str(self)!r})"