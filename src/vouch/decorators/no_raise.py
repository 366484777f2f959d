"""@does_not_raise decorator for asserting every call completes."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, overload

import wrapt

from vouch.assertions.no_raise import assert_does_not_raise

if TYPE_CHECKING:
    from vouch.function import MessageSource

__all__ = ['does_not_raise']


@overload
def does_not_raise[**P, T](func: Callable[P, T]) -> Callable[P, T]: ...


@overload
def does_not_raise[**P, T](
    func: None = None,
    *,
    message: MessageSource = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]: ...


def does_not_raise[**P, T](
    func: Callable[P, T] | None = None,
    *,
    message: MessageSource = None,
) -> Any:
    """Decorator asserting that the wrapped function never raises.

    Each call runs through assert_does_not_raise, so a raising call surfaces
    as AssertionFailedError chained to the original exception, and a normal
    call returns its value unchanged.

    Can be used with or without arguments:
        @does_not_raise
        def setup(): ...

        @does_not_raise(message='fixture setup')
        def setup(): ...

    Args:
        func: The function to wrap (when used without parentheses).
        message: Optional custom message, literal or zero-argument callable.

    Returns:
        The wrapped function, with its metadata preserved.

    Example:
        ```python
        @does_not_raise(message=lambda: 'parsing fixture')
        def parse(text: str) -> int:
            return int(text)

        parse('3')
        # 3
        parse('x')
        # AssertionFailedError: parsing fixture ==> Unexpected exception thrown: ValueError
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> T:
        return assert_does_not_raise(lambda: wrapped(*args, **kwargs), message)

    if func is not None:
        return wrapper(func)
    return wrapper
