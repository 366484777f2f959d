"""Shared helpers for assertion tests."""

from __future__ import annotations

from typing import NoReturn

import pytest
from vouch import AssertionFailedError


def recurse_indefinitely() -> NoReturn:
    """Recurse until the interpreter raises RecursionError."""
    recurse_indefinitely()


def expect_assertion_failed_error() -> NoReturn:
    """Fail the current test because no AssertionFailedError was raised."""
    pytest.fail('Should have thrown an AssertionFailedError')


def assert_message_equals(error: AssertionFailedError, expected: str) -> None:
    """Check the failure message and that a cause is attached."""
    assert str(error) == expected
    assert error.message == expected
    assert error.__cause__ is not None
