"""Binary outcome values: an operation either succeeded or failed.

LoadState.receive_outcome() binds one of these onto a state.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """An operation that succeeded with a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def error(self) -> None:
        return None


@dataclass(frozen=True)
class Failure(Generic[E]):
    """An operation that failed with an error."""

    error: E

    @property
    def is_success(self) -> bool:
        return False

    @property
    def value(self) -> None:
        return None


Outcome = Union[Success[T], Failure[E]]


def capture(func: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T, Exception]:
    """Call func and wrap what happens in an Outcome.

    The return value becomes Success(value). An Exception raised by func
    becomes Failure(exc); BaseExceptions such as KeyboardInterrupt are
    not caught.
    """
    try:
        return Success(func(*args, **kwargs))
    except Exception as exc:
        return Failure(exc)
