"""The common interface of automata that accept or reject words."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

from automatakit.word import Word

_MESSAGES = {"ACCEPTED": "Accepted!", "DENIED": "Denied.", "ABORT": "Abort!"}


class AcceptCode(Enum):
    """Outcome of running an automaton on a word."""

    ACCEPTED = "accepted"
    DENIED = "denied"
    ABORT = "abort"

    def message(self) -> str:
        return _MESSAGES[self.name]


class Automaton(ABC):
    """An automaton that decides whether it accepts a word."""

    @abstractmethod
    def accepts(self, word: Union[Word, str]) -> AcceptCode:
        """Run the automaton on a word, leaving the given word untouched."""

    @staticmethod
    def _fresh_word(word: Union[Word, str]) -> Word:
        return Word(str(word))

    def test(self, word: Union[Word, str]) -> AcceptCode:
        """Print the outcome for a word and return it."""
        text = str(word)
        code = self.accepts(text)
        print(f"Word {text} is: {code.message()}")
        return code