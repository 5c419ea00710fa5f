import pytest

from automatakit.states import State, States
from automatakit.symbol import Symbol
from automatakit.transitions import DFATransitions, NFATransitions, Transition


def _dfa_table():
    return DFATransitions([("q0", "0", "q1"), ("q0", "1", "q2")])


def _nfa_table():
    return NFATransitions(
        [
            ("q0", "a", ["q1", "q0"]),
            ("q1", "a", ["q1"]),
            ("q1", "b", ["q2"]),
        ]
    )


def test_dfa_table_prints_each_transition():
    assert str(_dfa_table()) == "q0 --0--> q1\nq0 --1--> q2\n"


def test_nfa_table_prints_target_sets():
    assert str(_nfa_table()) == (
        'q0 --a--> { "q0", "q1" }\n'
        'q1 --a--> { "q1" }\n'
        'q1 --b--> { "q2" }\n'
    )


def test_lambda_transition_uses_lambda_glyph():
    transition = Transition("q0", Symbol(Symbol.LAMBDA), States(["q1"]))
    assert str(transition) == 'q0 --λ--> { "q1" }'


def test_transition_coerces_strings():
    transition = Transition("q0", "a", "q1")
    assert transition.source == State("q0")
    assert transition.symbol == Symbol("a")
    assert transition.target == State("q1")


def test_dfa_has_and_get():
    table = _dfa_table()
    assert table.has("q0", "0")
    assert not table.has("q1", "0")
    assert table.get(State("q0"), Symbol("1")) == State("q2")


def test_get_missing_raises_key_error():
    with pytest.raises(KeyError):
        _dfa_table().get("q5", "0")


def test_dfa_keeps_first_target_for_a_key():
    table = DFATransitions()
    table.add("q0", "a", "q1")
    table.add("q0", "a", "q2")
    assert table.get("q0", "a") == State("q1")
    assert len(table) == 1


def test_nfa_merges_targets_for_a_key():
    table = NFATransitions()
    table.add("q0", "a", ["q1"])
    table.add("q0", "a", "q2")
    assert table.get("q0", "a") == States(["q1", "q2"])
    assert len(table) == 1


def test_update_from_another_table_round_trips():
    original = _nfa_table()
    copy = NFATransitions()
    copy.update(original)
    assert list(copy) == list(original)
    assert str(copy) == str(original)


def test_iteration_is_in_key_order():
    table = DFATransitions([("q1", "b", "q0"), ("q0", "b", "q1"), ("q0", "a", "q1")])
    keys = [(t.source, t.symbol) for t in table]
    assert keys == sorted(keys)
    assert len(keys) == 3