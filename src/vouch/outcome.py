"""Assertion outcomes: Success / Failed.

`check_does_not_raise` reports what happened instead of raising. Its result is
an `AssertionOutcome[T]`, which is either `Success(value)` or
`Failed(error)`. Both variants support structural pattern matching.

Example:
    ```python
    from vouch import Failed, Success, check_does_not_raise

    match check_does_not_raise(lambda: int('42')):
        case Success(value):
            print(value)  # 42
        case Failed(error):
            print(error.message)
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from vouch.errors import AssertionFailedError

__all__ = [
    'AssertionOutcome',
    'Failed',
    'Success',
]


@dataclass(slots=True, frozen=True)
class Success[T]:
    """The operation completed without raising.

    Attributes:
        value: Whatever the operation returned. None is a valid value.
    """

    value: T
    __match_args__ = ('value',)

    def is_success(self) -> bool:
        """Return True, indicating the assertion held.

        Returns:
            bool: Always True for Success instances.
        """
        return True

    def is_failed(self) -> bool:
        """Return False, indicating the assertion did not fail.

        Returns:
            bool: Always False for Success instances.
        """
        return False

    def unwrap(self) -> T:
        """Return the value produced by the operation.

        Returns:
            T: The contained value.
        """
        return self.value

    def unwrap_or(self, default: T) -> T:
        """Return the value (default unused for Success)."""
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Success[U]:
        """Transform the value using a function.

        Args:
            f: A callable that takes the value and returns a new value of type U.

        Returns:
            Success[U]: A new Success containing the transformed value.
        """
        return Success(f(self.value))

    def value_or_none(self) -> T | None:
        """Convert to an optional value."""
        return self.value

    def failure(self) -> None:
        """Convert to an optional error (always None for Success)."""
        return None

    def __repr__(self) -> str:
        """Return a string representation of the Success instance."""
        return f'Success({self.value!r})'


@dataclass(slots=True, frozen=True)
class Failed:
    """The operation raised; the assertion failed.

    Attributes:
        error: The assertion error, chained to the original failure.
    """

    error: AssertionFailedError
    __match_args__ = ('error',)

    def is_success(self) -> bool:
        """Return False, indicating the assertion did not hold.

        Returns:
            bool: Always False for Failed instances.
        """
        return False

    def is_failed(self) -> bool:
        """Return True, indicating the assertion failed.

        Returns:
            bool: Always True for Failed instances.
        """
        return True

    def unwrap(self) -> Any:
        """Raise the contained assertion error.

        The error keeps the original failure as its `__cause__`.

        Raises:
            AssertionFailedError: Always.
        """
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        """Return the default."""
        return default

    def map[U](self, f: Callable[[Any], U]) -> Failed:
        """Transform the value (no-op for Failed)."""
        return self

    def value_or_none(self) -> None:
        """Convert to an optional value (always None for Failed)."""
        return None

    def failure(self) -> AssertionFailedError:
        """Return the contained assertion error."""
        return self.error

    def __repr__(self) -> str:
        """Return a string representation of the Failed instance."""
        return f'Failed({self.error!r})'


type AssertionOutcome[T] = Success[T] | Failed
