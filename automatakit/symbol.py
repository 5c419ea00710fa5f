"""Symbols that make up words, alphabets and regular expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

_PRECEDENCE = {"*": 3, ".": 2, "+": 1}


@dataclass(frozen=True, order=True)
class Symbol:
    """A single character, with helpers for regular-expression operators."""

    char: str

    LAMBDA: ClassVar[str] = "\0"
    STAR: ClassVar[str] = "*"
    CONCAT: ClassVar[str] = "."
    UNION: ClassVar[str] = "+"
    LEFT_PARENTHESIS: ClassVar[str] = "("
    RIGHT_PARENTHESIS: ClassVar[str] = ")"

    def __post_init__(self) -> None:
        if not isinstance(self.char, str) or len(self.char) != 1:
            raise ValueError(f"a symbol must be a single character, got {self.char!r}")

    def is_lambda(self) -> bool:
        return self.char == self.LAMBDA

    def is_operator(self) -> bool:
        return self.char in _PRECEDENCE

    def is_unary_operator(self) -> bool:
        return self.char == self.STAR

    def is_star(self) -> bool:
        return self.char == self.STAR

    def is_concat(self) -> bool:
        return self.char == self.CONCAT

    def is_union(self) -> bool:
        return self.char == self.UNION

    def is_literal(self) -> bool:
        return self.char.isascii() and self.char.isalnum()

    def is_left_parenthesis(self) -> bool:
        return self.char == self.LEFT_PARENTHESIS

    def is_right_parenthesis(self) -> bool:
        return self.char == self.RIGHT_PARENTHESIS

    def precedence(self) -> int:
        """Binding strength of an operator: star, then concatenation, then union."""
        try:
            return _PRECEDENCE[self.char]
        except KeyError:
            raise ValueError(f"{self.char!r} is not an operator") from None

    def __str__(self) -> str:
        return self.char