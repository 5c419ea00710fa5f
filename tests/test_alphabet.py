from automatakit.alphabet import Alphabet
from automatakit.symbol import Symbol


def test_contains_with_symbol_and_char():
    a = Alphabet("abcdef")
    a.add(Symbol("g"))
    assert Symbol("a") in a
    assert "b" in a
    assert "g" in a
    assert "z" not in a


def test_add_char():
    a = Alphabet()
    a.add("x")
    assert "x" in a
    assert len(a) == 1


def test_lambda_is_not_added():
    a = Alphabet("ab")
    a.add(Symbol(Symbol.LAMBDA))
    assert Symbol(Symbol.LAMBDA) not in a
    assert len(a) == 2


def test_duplicates_collapse_and_iteration_is_sorted():
    a = Alphabet("cabbac")
    assert [s.char for s in a] == ["a", "b", "c"]
    assert len(a) == 3


def test_multi_character_string_is_not_contained():
    assert "ab" not in Alphabet("ab")


def test_from_symbols():
    a = Alphabet([Symbol("1"), Symbol("0")])
    assert [s.char for s in a] == ["0", "1"]