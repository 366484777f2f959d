"""Decorators: @does_not_raise."""

from vouch.decorators.no_raise import does_not_raise

__all__ = [
    'does_not_raise',
]
