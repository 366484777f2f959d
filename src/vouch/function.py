"""Callable shapes accepted by the assertions.

An assertion is handed an *operation*: a zero-argument callable that may
raise. Two shapes exist and the caller picks one by what it passes:

- `Action`: runs for its side effects and returns nothing.
- `ValueProducer[T]`: returns a value of type T.

Both are plain callables at runtime; the split only matters to type checkers,
which use it to decide whether an assertion hands a value back.

Custom failure messages come from a `MessageSource`: nothing, a literal
string, or a `MessageSupplier` that builds the string on demand.

Example:
    ```python
    from vouch import assert_does_not_raise

    assert_does_not_raise(lambda: None)  # Action
    value = assert_does_not_raise(lambda: 42)  # ValueProducer[int]
    assert_does_not_raise(lambda: 42, lambda: f'expensive {"context"}')
    ```
"""

from __future__ import annotations

from typing import Protocol

__all__ = [
    'Action',
    'MessageSource',
    'MessageSupplier',
    'ValueProducer',
]


class Action(Protocol):
    """A zero-argument operation run for its side effects. May raise."""

    def __call__(self) -> None: ...


class ValueProducer[T](Protocol):
    """A zero-argument operation that produces a value. May raise."""

    def __call__(self) -> T: ...


class MessageSupplier(Protocol):
    """Builds a failure message lazily, only when a failure is reported."""

    def __call__(self) -> str | None: ...


type MessageSource = str | MessageSupplier | None
