"""Assertion error types: dual struct+exception for Outcome and raise-based code."""

from __future__ import annotations

import msgspec

from vouch.messages import qualified_name

__all__ = [
    'AssertionFailedError',
    'AssertionFailure',
]


class AssertionFailure(msgspec.Struct, frozen=True, gc=False):
    """An assertion failed - struct variant for reporting and serialization.

    Attributes:
        message: The rendered failure message.
        cause_type: Qualified type name of the original failure, if any.
    """

    message: str
    cause_type: str | None = None

    def to_exception(self) -> AssertionFailedError:
        """Convert to exception for raise-based code.

        The original cause object is not part of the struct, so the returned
        exception carries no `__cause__`.
        """
        return AssertionFailedError(self.message)

    def encode(self) -> bytes:
        """Encode as JSON for test-reporting tools."""
        return msgspec.json.encode(self)

    @classmethod
    def decode(cls, data: bytes | str) -> AssertionFailure:
        """Decode JSON produced by `encode`."""
        return msgspec.json.decode(data, type=cls)


class AssertionFailedError(AssertionError):
    """An assertion failed - exception variant.

    Subclasses the builtin `AssertionError` so test runners report it as a
    failed assertion rather than an unexpected error. When a cause is given it
    is recorded as `__cause__`, exactly as `raise ... from cause` would.

    Example:
        ```python
        try:
            open('/missing')
        except OSError as exc:
            raise AssertionFailedError('could not open', cause=exc) from exc
        ```
    """

    def __init__(self, message: str | None = None, cause: BaseException | None = None) -> None:
        self._message = message or ''
        super().__init__(self._message)
        if cause is not None:
            self.__cause__ = cause

    @property
    def message(self) -> str:
        """The failure message, never None."""
        return self._message

    @property
    def cause(self) -> BaseException | None:
        """The original failure this assertion wraps, if any."""
        return self.__cause__

    def to_struct(self) -> AssertionFailure:
        """Convert to struct for Outcome-based code and reporting."""
        cause = self.__cause__
        return AssertionFailure(
            self._message,
            qualified_name(type(cause)) if cause is not None else None,
        )
