"""Result pattern for relocation outcomes.

A relocation either succeeds with a value or fails with a
:class:`~file_sorter.exceptions.RelocateError`. Returning the error as a value
keeps one file's failure from unwinding the whole run.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

T = TypeVar('T')  # Success type
E = TypeVar('E', bound=Exception)  # Error type


class Result(ABC, Generic[T, E]):
    """Either a successful value or an error."""

    @abstractmethod
    def is_success(self) -> bool:
        ...

    def is_failure(self) -> bool:
        return not self.is_success()

    @abstractmethod
    def value(self) -> T:
        """Get the success value.

        Raises:
            ValueError: If the result is a failure.
        """
        ...

    @abstractmethod
    def error(self) -> E:
        """Get the error.

        Raises:
            ValueError: If the result is a success.
        """
        ...

    def or_else_raise(self) -> T:
        """Get the success value or raise the error."""
        if self.is_failure():
            raise self.error()
        return self.value()

    def match(self, *, success: Callable[[T], Any], failure: Callable[[E], Any]) -> Any:
        """Dispatch on the result."""
        if self.is_success():
            return success(self.value())
        return failure(self.error())


@dataclass(frozen=True, slots=True)
class Success(Result[T, E]):
    """A successful operation with a value."""
    _value: T

    def __repr__(self) -> str:
        return f"Success({self._value!r})"

    def is_success(self) -> bool:
        return True

    def value(self) -> T:
        return self._value

    def error(self) -> E:
        raise ValueError("Cannot get error from Success result")


@dataclass(frozen=True, slots=True)
class Failure(Result[T, E]):
    """A failed operation with an error."""
    _error: E

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"

    def is_success(self) -> bool:
        return False

    def value(self) -> T:
        raise ValueError(f"Cannot get value from Failure result: {self._error}")

    def error(self) -> E:
        return self._error


def success(value: T) -> Result[T, Any]:
    """Create a Success result."""
    return Success(value)


def failure(error: E) -> Result[Any, E]:
    """Create a Failure result."""
    return Failure(error)

