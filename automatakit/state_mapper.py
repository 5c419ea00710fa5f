"""Naming of fresh states and of sets of states."""

from __future__ import annotations

from automatakit.states import State, States


class StateMapper:
    """Hands out fresh state names q0, q1, ... and remembers names given to state sets."""

    def __init__(self) -> None:
        self._next_id = 0
        self._defined: set[State] = set()
        self._names: dict[States, State] = {}

    def _fresh(self) -> State:
        state = State(f"q{self._next_id}")
        self._defined.add(state)
        self._next_id += 1
        return state

    def add(self, states: States) -> None:
        """Give the set a fresh name unless it already has one."""
        if states in self._names:
            return
        self._names[states] = self._fresh()

    def reserve_state(self) -> State:
        """Return a fresh state not tied to any set."""
        return self._fresh()

    def has(self, states: States) -> bool:
        return states in self._names

    def get(self, states: States) -> State:
        try:
            return self._names[states]
        except KeyError:
            raise KeyError(f"no name for {states}") from None