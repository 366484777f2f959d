"""Failure message formatting shared by all assertions.

Every assertion message has the shape `<custom message> ==> <detail>` when
the caller supplied a non-blank custom message, and `<detail>` alone
otherwise. Both the separator and the detail texts are relied on by
golden-output tests, so they are exported as constants.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from vouch.function import MessageSource

__all__ = [
    'SEPARATOR',
    'UNEXPECTED_EXCEPTION',
    'build_prefix',
    'format_unexpected',
    'null_safe_get',
    'qualified_name',
]

SEPARATOR = ' ==> '
UNEXPECTED_EXCEPTION = 'Unexpected exception thrown: '

# Types from these modules are printed bare, as tracebacks do.
_UNQUALIFIED_MODULES = frozenset({'builtins', '__main__'})


def null_safe_get(source: MessageSource | Any) -> str | None:
    """Resolve a message source to a string.

    Args:
        source: None, a string, or a zero-argument callable returning one.

    Returns:
        The message, or None when there is none. Callables are invoked
        exactly once per call.
    """
    if source is None:
        return None
    if isinstance(source, str):
        return source
    if callable(source):
        message = source()
        return None if message is None else str(message)
    return str(source)


def build_prefix(message: str | None) -> str:
    """Return `message + SEPARATOR`, or an empty string for a blank message."""
    if message is None or not message.strip():
        return ''
    return f'{message}{SEPARATOR}'


def qualified_name(exc_type: type) -> str:
    """Return the fully qualified name of a type.

    Example:
        ```python
        qualified_name(OSError)
        # 'OSError'
        qualified_name(json.JSONDecodeError)
        # 'json.decoder.JSONDecodeError'
        ```
    """
    module = getattr(exc_type, '__module__', None)
    name = getattr(exc_type, '__qualname__', exc_type.__name__)
    if not module or module in _UNQUALIFIED_MODULES:
        return name
    return f'{module}.{name}'


def format_unexpected(exc: BaseException, source: MessageSource = None) -> str:
    """Build the message for an operation that raised `exc` unexpectedly.

    The message source is only resolved here, so suppliers run solely on the
    failure path.
    """
    return build_prefix(null_safe_get(source)) + UNEXPECTED_EXCEPTION + qualified_name(type(exc))
