"""Assertion utilities: assert_does_not_raise and check_does_not_raise."""

from vouch.assertions.no_raise import assert_does_not_raise, check_does_not_raise

__all__ = [
    'assert_does_not_raise',
    'check_does_not_raise',
]
