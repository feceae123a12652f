"""
Two-variant result type used by the parser combinators.

Grammar mismatches are expected while trying alternatives, so rules
return ``Ok``/``Err`` values instead of raising. ``unwrap`` converts a
final ``Err`` back into an exception at the public boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E", bound=Exception)


class Ok(Generic[T, E]):
    """Successful result wrapping a value."""

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def is_ok(self) -> bool:
        return True

    def is_error(self) -> bool:
        return False

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        return Ok(mapper(self.value))

    def flat_map(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return mapper(self.value)

    def or_else(self, mapper: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return self

    def unwrap(self) -> T:
        return self.value


class Err(Generic[T, E]):
    """Failed result wrapping an error."""

    __slots__ = ("error",)

    def __init__(self, error: E) -> None:
        self.error = error

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def is_ok(self) -> bool:
        return False

    def is_error(self) -> bool:
        return True

    def map(self, mapper: Callable[[T], U]) -> Result[U, E]:
        return Err(self.error)

    def flat_map(self, mapper: Callable[[T], Result[U, E]]) -> Result[U, E]:
        return Err(self.error)

    def or_else(self, mapper: Callable[[E], Result[T, E]]) -> Result[T, E]:
        return mapper(self.error)

    def unwrap(self) -> T:
        raise self.error


Result = Ok[T, E] | Err[T, E]


def ok(value: T) -> Ok[T, E]:
    return Ok(value)


def err(error: E) -> Err[T, E]:
    return Err(error)
