"""assert_does_not_raise and check_does_not_raise.

Both run an operation once and treat anything it raises as unexpected:

- assert_does_not_raise: returns the operation's value, or raises
  AssertionFailedError chained to the original failure.
- check_does_not_raise: returns Success(value) or Failed(error) instead of
  raising.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, overload

from vouch._config import get_config
from vouch._logging import get_logger
from vouch.errors import AssertionFailedError
from vouch.messages import format_unexpected, qualified_name
from vouch.outcome import Failed, Success

if TYPE_CHECKING:
    from vouch.function import Action, MessageSource, ValueProducer
    from vouch.outcome import AssertionOutcome

__all__ = ['assert_does_not_raise', 'check_does_not_raise']


@overload
def check_does_not_raise(op: Action, message: MessageSource = None) -> AssertionOutcome[None]: ...


@overload
def check_does_not_raise[T](op: ValueProducer[T], message: MessageSource = None) -> AssertionOutcome[T]: ...


def check_does_not_raise[T](
    op: Action | ValueProducer[T],
    message: MessageSource = None,
) -> AssertionOutcome[T] | AssertionOutcome[None]:
    """Run `op` and report whether it raised.

    Args:
        op: Zero-argument operation, with or without a return value.
        message: Optional custom message, literal or zero-argument callable.
            A callable is only invoked if `op` raises.

    Returns:
        Success(value) if `op` returned, Failed(error) if it raised anything.
        The error's `__cause__` is the original exception.

    Example:
        ```python
        check_does_not_raise(lambda: 'foo')
        # Success('foo')

        check_does_not_raise(lambda: open('/missing'), 'reading config')
        # Failed(AssertionFailedError('reading config ==> Unexpected exception thrown: FileNotFoundError'))
        ```
    """
    try:
        value = op()
    except BaseException as e:  # noqa: BLE001 - every signal counts as unexpected
        error = AssertionFailedError(format_unexpected(e, message), cause=e)
        _log_failure(e, message)
        return Failed(error)
    return Success(value)


@overload
def assert_does_not_raise(op: Action, message: MessageSource = None) -> None: ...


@overload
def assert_does_not_raise[T](op: ValueProducer[T], message: MessageSource = None) -> T: ...


def assert_does_not_raise[T](
    op: Action | ValueProducer[T],
    message: MessageSource = None,
) -> T | None:
    """Assert that `op` completes without raising and return its value.

    Anything raised by `op` is unexpected, including `AssertionError`,
    `RecursionError` and other `BaseException` subclasses; none of them
    propagate as-is.

    Args:
        op: Zero-argument operation, with or without a return value.
        message: Optional custom message, literal or zero-argument callable.
            A callable is only invoked if `op` raises.

    Returns:
        Whatever `op` returned (None for an action).

    Raises:
        AssertionFailedError: If `op` raised. The message is
            ``"Unexpected exception thrown: <type>"``, prefixed with
            ``"<message> ==> "`` when a non-blank message was given.

    Example:
        ```python
        config = assert_does_not_raise(lambda: load_config('app.toml'))
        assert config.debug is False

        assert_does_not_raise(lambda: 1 / 0, 'dividing')
        # AssertionFailedError: dividing ==> Unexpected exception thrown: ZeroDivisionError
        ```
    """
    return check_does_not_raise(op, message).unwrap()


def _log_failure(exc: BaseException, message: MessageSource) -> None:
    if get_config().log_level is None:
        return
    get_logger(__name__).debug(
        'unexpected_exception',
        exc_type=qualified_name(type(exc)),
        has_custom_message=message is not None,
    )
