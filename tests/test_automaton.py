import pytest

from automatakit.automaton import AcceptCode, Automaton
from automatakit.word import Word


class _OnlyAs(Automaton):
    """Accepts words of 'a' only; aborts on anything outside {a, b}."""

    def accepts(self, word):
        word = self._fresh_word(word)
        seen_b = False
        while len(word):
            symbol = word.process_symbol()
            if symbol.char not in "ab":
                return AcceptCode.ABORT
            seen_b = seen_b or symbol.char == "b"
        return AcceptCode.DENIED if seen_b else AcceptCode.ACCEPTED


@pytest.mark.parametrize(
    "code, message",
    [
        (AcceptCode.ACCEPTED, "Accepted!"),
        (AcceptCode.DENIED, "Denied."),
        (AcceptCode.ABORT, "Abort!"),
    ],
)
def test_messages(code, message):
    assert code.message() == message


def test_automaton_is_abstract():
    with pytest.raises(TypeError):
        Automaton()


def test_test_prints_outcome_and_returns_code(capsys):
    code = _OnlyAs().test(Word("aa"))
    assert code is AcceptCode.ACCEPTED
    assert capsys.readouterr().out == f"Word aa is: {AcceptCode.ACCEPTED.message()}\n"


def test_test_reports_denied_and_abort(capsys):
    automaton = _OnlyAs()
    assert automaton.test(Word("ab")) is AcceptCode.DENIED
    assert automaton.test(Word("ac")) is AcceptCode.ABORT
    assert capsys.readouterr().out == "Word ab is: Denied.\nWord ac is: Abort!\n"


def test_test_accepts_plain_strings(capsys):
    word = Automaton._fresh_word("a")
    assert str(word) == "a"
    assert len(word) == 1
    assert _OnlyAs().test("a") is AcceptCode.ACCEPTED
    assert capsys.readouterr().out == f"Word a is: {AcceptCode.ACCEPTED.message()}\n"


def test_test_does_not_consume_a_word(capsys):
    word = Word("aab")
    _OnlyAs().test(word)
    assert len(word) == 3
    assert capsys.readouterr().out == "Word aab is: Denied.\n"


def test_fresh_word_copies():
    word = Word("ab")
    copy = Automaton._fresh_word(word)
    copy.process_symbol()
    assert str(word) == "ab"
    assert str(copy) == "b"