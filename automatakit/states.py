"""Named automaton states and immutable sets of them."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import Iterable, Iterator, Union


@dataclass(frozen=True, order=True)
class State:
    """A state identified by its name."""

    name: str

    def __str__(self) -> str:
        return self.name


StateLike = Union[State, str]


def _as_state(value: StateLike) -> State:
    return value if isinstance(value, State) else State(value)


@total_ordering
class States:
    """An immutable, ordered set of states."""

    __slots__ = ("_states", "_sorted")

    def __init__(self, states: StateLike | Iterable[StateLike] = ()) -> None:
        if isinstance(states, (State, str)):
            members = frozenset({_as_state(states)})
        else:
            members = frozenset(_as_state(s) for s in states)
        self._states = members
        self._sorted = tuple(sorted(members))

    def with_states(self, other: StateLike | Iterable[StateLike]) -> States:
        """Return a copy holding these states and the given ones."""
        return States(self._states | States(other)._states)

    def without(self, state: StateLike) -> States:
        """Return a copy without the given state."""
        return States(self._states - {_as_state(state)})

    def intersect(self, other: States) -> States:
        return States(self._states & States(other)._states)

    def unite(self, other: States) -> States:
        return self.with_states(other)

    def format(self) -> str:
        """Render as `{ "q0", "q1" }`."""
        inner = ", ".join(f'"{s.name}"' for s in self._sorted)
        return f"{{ {inner} }}" if inner else "{ }"

    def __contains__(self, state: object) -> bool:
        if isinstance(state, str):
            state = State(state)
        return state in self._states

    def __len__(self) -> int:
        return len(self._states)

    def __iter__(self) -> Iterator[State]:
        return iter(self._sorted)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, States):
            return NotImplemented
        return self._states == other._states

    def __hash__(self) -> int:
        return hash(self._states)

    def __lt__(self, other: States) -> bool:
        if not isinstance(other, States):
            return NotImplemented
        return self._sorted < other._sorted

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"States({[s.name for s in self._sorted]!r})"