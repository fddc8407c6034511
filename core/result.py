"""
Result pattern for explicit error handling.

Every OLX API call returns a ``Result``: either a ``Success`` carrying the
response body or a ``Failure`` carrying an ``OlxError``. Callers branch on
the result instead of catching exceptions.

Example:
    >>> result = await autoupload.get_published_ads(access_token)
    >>> if result.is_success():
    ...     ads = result.unwrap()
    ... elif result.error.has_remote_body:
    ...     print(result.error.body)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True, slots=True)
class Success[T]:
    """
    A successful result.

    Attributes:
        value: The success value.
    """

    value: T

    def is_success(self) -> bool:
        """Return True."""
        return True

    def is_failure(self) -> bool:
        """Return False."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, _default: T) -> T:
        """Return the contained value, ignoring the default."""
        return self.value

    def map[U](self, func: Callable[[T], U]) -> Success[U]:
        """
        Apply a function to the success value.

        Args:
            func: Function to apply to the value.

        Returns:
            New Success with the mapped value.
        """
        return Success(func(self.value))

    def and_then[U, E](self, func: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """
        Chain a computation that may itself fail.

        Args:
            func: Function taking the value and returning a new Result.

        Returns:
            Whatever ``func`` returns.
        """
        return func(self.value)


@dataclass(frozen=True, slots=True)
class Failure[E]:
    """
    A failed result.

    Attributes:
        error: The error value.
    """

    error: E

    def is_success(self) -> bool:
        """Return False."""
        return False

    def is_failure(self) -> bool:
        """Return True."""
        return True

    def unwrap(self) -> Never:
        """
        Raise, since a Failure has no success value.

        Raises:
            ValueError: Always.
        """
        raise ValueError(f"Cannot unwrap Failure: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        """Return the provided default."""
        return default

    def map[T, U](self, _func: Callable[[T], U]) -> Failure[E]:
        """Return self unchanged."""
        return self

    def and_then[T, U](self, _func: Callable[[T], Result[U, E]]) -> Failure[E]:
        """Return self unchanged; the chained function is never called."""
        return self


type Result[T, E] = Success[T] | Failure[E]


def success[T](value: T) -> Success[T]:
    """Create a Success result."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Create a Failure result."""
    return Failure(error)
