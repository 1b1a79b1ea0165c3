"""Lifecycle of an asynchronously loaded value.

A LoadState is exactly one of three frozen variants:

    Loading(content=None)        request in flight, stale content if any
    Failed(error, content=None)  last request failed, stale content if any
    Ready(content)               last request succeeded

None marks absent content. Every operation returns a new state; use
StateSlot (slot.py) to hold a state that is updated in place.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from .decoding import json_decoder
from .outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)

C = TypeVar("C")  # content type
E = TypeVar("E")  # error type
NC = TypeVar("NC")
NE = TypeVar("NE")


class LoadState(Generic[C, E]):
    """Base of the Loading / Failed / Ready variants.

    Not instantiable itself and closed to subclasses outside this module.
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                f"LoadState is closed to new variants, cannot subclass as {cls.__qualname__}"
            )

    def __new__(cls, *args: Any, **kwargs: Any) -> "LoadState[C, E]":
        if cls is LoadState:
            raise TypeError(
                "LoadState cannot be instantiated directly; "
                "use Loading, Failed, Ready or LoadState.from_parts()"
            )
        return super().__new__(cls)

    # --- Construction ---

    @classmethod
    def from_parts(cls, content: C | None = None, error: E | None = None) -> "LoadState[C, E]":
        """Build a state from optional content and error.

        An error wins: Failed(error, content). Otherwise content gives
        Ready(content). With neither, the result is an empty Loading;
        this never yields a Loading that keeps content.
        """
        if error is not None:
            return Failed(error, content)
        if content is not None:
            return Ready(content)
        return Loading()

    @classmethod
    def loading(cls) -> "Loading[C, E]":
        """An empty Loading state."""
        return Loading()

    @classmethod
    def failure(cls, error: E) -> "Failed[C, E]":
        """A Failed state with no content to fall back on."""
        return Failed(error)

    # --- Accessors ---

    content: C | None
    error: E | None

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    @property
    def is_failed(self) -> bool:
        return isinstance(self, Failed)

    @property
    def is_ready(self) -> bool:
        return isinstance(self, Ready)

    # --- Mapping ---

    def map(self, transform: Callable[[C], NC]) -> "LoadState[NC, E]":
        """Apply transform to the content, when there is any.

        The variant and any error are kept. Absent content stays absent
        and transform is not called.

        Raises:
            ValueError: If transform returns None for a Ready state, since
                None marks absent content.
        """
        if isinstance(self, Ready):
            return Ready(transform(self.content))
        content = None if self.content is None else transform(self.content)
        if isinstance(self, Failed):
            return Failed(self.error, content)
        return Loading(content)

    def compact_map(self, transform: Callable[[C | None], NC]) -> "LoadState[NC, E]":
        """Apply transform to the optional content of every variant.

        Unlike map(), transform is also called when content is absent
        (it receives None), so the result always carries content.

        Raises:
            ValueError: If transform returns None for a Ready state, since
                None marks absent content.
        """
        content = transform(self.content)
        if isinstance(self, Ready):
            return Ready(content)
        if isinstance(self, Failed):
            return Failed(self.error, content)
        return Loading(content)

    def map_error(self, transform: Callable[[E], NE]) -> "LoadState[C, NE]":
        """Apply transform to the error of a Failed state; others pass through."""
        if isinstance(self, Failed):
            return Failed(transform(self.error), self.content)
        return self

    # --- Transitions ---

    def receive_loading(self) -> "Loading[C, E]":
        """Start loading again, keeping the current content as stale content."""
        return Loading(self.content)

    def receive(self, content: C) -> "Ready[C, E]":
        """Fresh content arrived; any previous error is dropped."""
        return Ready(content)

    def receive_error(self, error: E) -> "Failed[C, E]":
        """The request failed; the current content is kept as stale content."""
        return Failed(error, self.content)

    def purge(self) -> "Loading[C, E]":
        """Drop content and error and restart on an empty Loading."""
        return Loading()

    def receive_outcome(self, outcome: Outcome[C, E]) -> "LoadState[C, E]":
        """Bind a Success or Failure.

        Success(value) behaves like receive(value), Failure(error) like
        receive_error(error).

        Raises:
            TypeError: If outcome is neither Success nor Failure.
        """
        if isinstance(outcome, Success):
            return self.receive(outcome.value)
        if isinstance(outcome, Failure):
            return self.receive_error(outcome.error)
        raise TypeError(f"Expected Success or Failure, got {type(outcome).__name__}")

    def receive_data(
        self,
        data: bytes | str,
        decoder: Callable[[bytes | str], C] | None = None,
        map_error: Callable[[Exception], E] | None = None,
    ) -> "LoadState[C, E]":
        """Decode data into fresh content, or fail keeping the current content.

        Args:
            data: Raw payload.
            decoder: Callable turning data into content. Defaults to a plain
                JSON decoder (see decoding.json_decoder).
            map_error: Translates the decode fault into the error type.
                Defaults to the identity, leaving the exception as the error.

        Returns:
            Ready(decoded) on success, Failed(map_error(fault), self.content)
            if decoder raises. The fault never escapes this method.
        """
        decode = decoder or json_decoder()
        try:
            content = decode(data)
        except Exception as exc:
            logger.debug("Decoding failed, keeping stale content: %s", exc)
            error = exc if map_error is None else map_error(exc)
            return self.receive_error(error)
        return self.receive(content)


@dataclass(frozen=True)
class Loading(LoadState[C, E]):
    """A request is in flight. content is the last known value, if any."""

    content: C | None = None

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Failed(LoadState[C, E]):
    """The last request failed. content is the last known value, if any."""

    error: E
    content: C | None = None

    def __post_init__(self) -> None:
        if self.error is None:
            raise ValueError("Failed requires an error, got None")


@dataclass(frozen=True)
class Ready(LoadState[C, E]):
    """The last request succeeded with fresh content."""

    content: C

    def __post_init__(self) -> None:
        if self.content is None:
            raise ValueError("Ready requires content, got None")

    @property
    def error(self) -> None:
        return None


# A state whose requests never fail.
SafeState = LoadState[C, NoReturn]
