"""Mutable holder for a LoadState.

StateSlot is the in-place counterpart of the LoadState transitions: each
method computes the next state with the matching LoadState method and
stores it. It does no locking; callers sharing a slot between threads or
tasks must synchronise access themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

from .outcome import Outcome
from .state import C, E, LoadState, Loading

logger = logging.getLogger(__name__)


class StateSlot(Generic[C, E]):
    """Caller-owned slot holding the current LoadState.

    Args:
        initial: Starting state. Defaults to an empty Loading.
        name: Label used in log messages.
    """

    def __init__(self, initial: LoadState[C, E] | None = None, name: str = "") -> None:
        self.name = name
        self._state: LoadState[C, E] = Loading()
        if initial is not None:
            self.set(initial)

    def __repr__(self) -> str:
        return f"StateSlot(name={self.name!r}, state={self._state!r})"

    @property
    def state(self) -> LoadState[C, E]:
        return self._state

    @property
    def content(self) -> C | None:
        return self._state.content

    @property
    def error(self) -> E | None:
        return self._state.error

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    def set(self, state: LoadState[C, E]) -> None:
        """Replace the held state.

        Raises:
            TypeError: If state is not a LoadState.
        """
        if not isinstance(state, LoadState):
            raise TypeError(f"StateSlot holds LoadState values, got {type(state).__name__}")
        previous = self._state
        self._state = state
        if type(previous) is not type(state):
            logger.debug(
                "%s: %s -> %s",
                self.name or "slot", type(previous).__name__, type(state).__name__,
            )

    def receive_loading(self) -> None:
        self.set(self._state.receive_loading())

    def receive(self, content: C) -> None:
        self.set(self._state.receive(content))

    def receive_error(self, error: E) -> None:
        self.set(self._state.receive_error(error))

    def purge(self) -> None:
        """Drop content and error and restart on an empty Loading."""
        self.set(self._state.purge())

    def receive_outcome(self, outcome: Outcome[C, E]) -> None:
        """Store Ready on Success, Failed (keeping content) on Failure."""
        self.set(self._state.receive_outcome(outcome))

    def receive_data(
        self,
        data: bytes | str,
        decoder: Callable[[bytes | str], C] | None = None,
        map_error: Callable[[Exception], E] | None = None,
    ) -> None:
        """Decode data into the slot. See LoadState.receive_data()."""
        self.set(self._state.receive_data(data, decoder, map_error))
