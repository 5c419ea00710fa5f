import pytest

from automatakit.symbol import Symbol


def test_char_is_kept():
    assert Symbol("c").char == "c"
    assert str(Symbol("c")) == "c"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_characters(bad):
    with pytest.raises(ValueError):
        Symbol(bad)


def test_lambda():
    assert Symbol(Symbol.LAMBDA).is_lambda()
    assert not Symbol("a").is_lambda()
    assert not Symbol(Symbol.LAMBDA).is_literal()


@pytest.mark.parametrize("char", ["a", "Z", "0", "9"])
def test_literals(char):
    symbol = Symbol(char)
    assert symbol.is_literal()
    assert not symbol.is_operator()


@pytest.mark.parametrize("char", ["*", ".", "+", "(", ")", " ", "é"])
def test_non_literals(char):
    assert not Symbol(char).is_literal()


def test_operator_kinds():
    assert Symbol("*").is_star() and Symbol("*").is_unary_operator()
    assert Symbol(".").is_concat() and not Symbol(".").is_unary_operator()
    assert Symbol("+").is_union() and Symbol("+").is_operator()
    assert not Symbol("(").is_operator()
    assert Symbol("(").is_left_parenthesis()
    assert Symbol(")").is_right_parenthesis()


def test_precedence_order():
    assert Symbol("*").precedence() == 3
    assert Symbol(".").precedence() == 2
    assert Symbol("+").precedence() == 1


def test_precedence_of_non_operator_raises():
    with pytest.raises(ValueError):
        Symbol("a").precedence()


def test_ordering_and_equality():
    assert Symbol("a") < Symbol("b")
    assert Symbol("a") == Symbol("a")
    assert sorted([Symbol("c"), Symbol("a"), Symbol("b")]) == [Symbol("a"), Symbol("b"), Symbol("c")]