"""
Outcome of a non-raising parse: Success(value) or Failure(error)
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A parsed value object."""

    value: T

    def is_success(self) -> bool:
        return True

    def is_failure(self) -> bool:
        return False

    def or_else(self, default: Any) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure(Generic[E]):
    """
    The error that prevented parsing.

    Attributes:
        error: Usually an InvalidFormatError carrying the rejected input in details
    """

    error: E

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return True

    def or_else(self, default: Any) -> Any:
        """Return the default (commonly None) in place of a value."""
        return default

    def unwrap(self) -> None:
        """
        Raise the carried error.

        Raises:
            The carried exception, or ValueError wrapping a non-exception error
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise ValueError(f"Attempted to unwrap a Failure: {self.error}")


Result = Success[T] | Failure[E]
