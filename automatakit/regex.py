"""Regular expressions over alphanumeric literals and their conversion to automata."""

from __future__ import annotations

from enum import Enum
from itertools import pairwise

from automatakit.nfa import NFA, NFAFragment
from automatakit.state_mapper import StateMapper
from automatakit.states import States
from automatakit.symbol import Symbol
from automatakit.transitions import NFATransitions, Transition

_LAMBDA = Symbol(Symbol.LAMBDA)


class RegExError(ValueError):
    """A regular expression that cannot be parsed."""


class RegExNotation(Enum):
    INFIX = "infix"
    POSTFIX = "postfix"


def _needs_concat(a: Symbol, b: Symbol) -> bool:
    left = a.is_literal() or a.is_star() or a.is_right_parenthesis()
    right = b.is_literal() or b.is_left_parenthesis()
    return left and right


def _literal_fragment(symbol: Symbol, namer: StateMapper) -> NFAFragment:
    start = namer.reserve_state()
    end = namer.reserve_state()
    return NFAFragment(NFATransitions([Transition(start, symbol, States(end))]), start, States(end))


def _star_fragment(fragment: NFAFragment, namer: StateMapper) -> NFAFragment:
    start = namer.reserve_state()
    end = namer.reserve_state()
    table = NFATransitions(fragment.transitions)
    table.add(start, _LAMBDA, States(fragment.initial))
    table.add(start, _LAMBDA, States(end))
    for state in fragment.accept:
        table.add(state, _LAMBDA, States(end))
    table.add(end, _LAMBDA, States(fragment.initial))
    return NFAFragment(table, start, States(end))


def _union_fragment(first: NFAFragment, second: NFAFragment, namer: StateMapper) -> NFAFragment:
    start = namer.reserve_state()
    end = namer.reserve_state()
    table = NFATransitions(first.transitions)
    table.update(second.transitions)
    table.add(start, _LAMBDA, States([first.initial, second.initial]))
    for state in (*first.accept, *second.accept):
        table.add(state, _LAMBDA, States(end))
    return NFAFragment(table, start, States(end))


def _concat_fragment(first: NFAFragment, second: NFAFragment, namer: StateMapper) -> NFAFragment:
    start = namer.reserve_state()
    end = namer.reserve_state()
    table = NFATransitions(first.transitions)
    table.update(second.transitions)
    table.add(start, _LAMBDA, States(first.initial))
    for state in first.accept:
        table.add(state, _LAMBDA, States(second.initial))
    for state in second.accept:
        table.add(state, _LAMBDA, States(end))
    return NFAFragment(table, start, States(end))


def build_fragment(symbol: Symbol | str, namer: StateMapper, *args: NFAFragment) -> NFAFragment:
    """Build the fragment for a literal (no operands), a star (one) or a binary operator (two)."""
    symbol = symbol if isinstance(symbol, Symbol) else Symbol(symbol)
    if symbol.is_literal() and not args:
        return _literal_fragment(symbol, namer)
    if symbol.is_star() and len(args) == 1:
        return _star_fragment(args[0], namer)
    if symbol.is_union() and len(args) == 2:
        return _union_fragment(args[0], args[1], namer)
    if symbol.is_concat() and len(args) == 2:
        return _concat_fragment(args[0], args[1], namer)
    raise ValueError(f"cannot build a fragment for {str(symbol)!r} with {len(args)} operand(s)")


class RegEx:
    """A regular expression with literals, '*', '.', '+' and parentheses."""

    def __init__(self, expression: str, notation: RegExNotation = RegExNotation.INFIX) -> None:
        self.expression = str(expression)
        self.notation = RegExNotation(notation)

    def _with_explicit_concat(self) -> str:
        symbols = [Symbol(c) for c in self.expression]
        if not symbols:
            return ""
        pieces = []
        for a, b in pairwise(symbols):
            pieces.append(a.char)
            if _needs_concat(a, b):
                pieces.append(Symbol.CONCAT)
        pieces.append(symbols[-1].char)
        return "".join(pieces)

    def to_postfix(self) -> RegEx:
        """The same expression in postfix notation, by the shunting-yard algorithm."""
        if self.notation is RegExNotation.POSTFIX:
            return self

        output: list[str] = []
        operators: list[Symbol] = []
        for symbol in map(Symbol, self._with_explicit_concat()):
            if symbol.is_literal():
                output.append(symbol.char)
            elif symbol.is_operator():
                while (
                    operators
                    and not operators[-1].is_left_parenthesis()
                    and operators[-1].precedence() >= symbol.precedence()
                ):
                    output.append(operators.pop().char)
                operators.append(symbol)
            elif symbol.is_left_parenthesis():
                operators.append(symbol)
            elif symbol.is_right_parenthesis():
                while operators and not operators[-1].is_left_parenthesis():
                    output.append(operators.pop().char)
                if not operators:
                    raise RegExError("mismatched parentheses in regular expression")
                operators.pop()

        while operators:
            top = operators.pop()
            if top.is_left_parenthesis():
                raise RegExError("mismatched parentheses in regular expression")
            output.append(top.char)

        return RegEx("".join(output), RegExNotation.POSTFIX)

    def to_nfa(self) -> NFA:
        """A lambda-NFA recognising the expression, built fragment by fragment."""
        namer = StateMapper()
        postfix = self.to_postfix().expression
        if not postfix:
            return NFA([], "q0", [])

        stack: list[NFAFragment] = []
        for symbol in map(Symbol, postfix):
            if symbol.is_literal():
                stack.append(build_fragment(symbol, namer))
            elif symbol.is_unary_operator():
                if not stack:
                    raise RegExError(f"missing operand for {symbol.char!r}")
                stack.append(build_fragment(symbol, namer, stack.pop()))
            elif symbol.is_operator():
                if len(stack) < 2:
                    raise RegExError(f"missing operand for {symbol.char!r}")
                second = stack.pop()
                first = stack.pop()
                stack.append(build_fragment(symbol, namer, first, second))

        if not stack:
            raise RegExError(f"no literals in expression {self.expression!r}")
        return NFA.from_fragment(stack[-1])

    def __str__(self) -> str:
        return self.expression

    def __repr__(self) -> str:
        return f"RegEx({self.expression!r}, {self.notation})"