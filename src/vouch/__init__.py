"""vouch: assert that code under test does not raise.

Flat imports (preferred):
    from vouch import assert_does_not_raise, check_does_not_raise
    from vouch import AssertionFailedError, Success, Failed

Submodule imports (for organization):
    from vouch.assertions import assert_does_not_raise
    from vouch.decorators import does_not_raise
    from vouch.messages import format_unexpected
"""

# Assertions
from vouch.assertions import assert_does_not_raise, check_does_not_raise

# Configuration
from vouch._config import VouchConfig, get_config, init

# Decorators
from vouch.decorators import does_not_raise

# Errors
from vouch.errors import AssertionFailedError, AssertionFailure

# Callable shapes
from vouch.function import Action, MessageSource, MessageSupplier, ValueProducer

# Outcomes
from vouch.outcome import AssertionOutcome, Failed, Success

__all__ = [
    'Action',
    'AssertionFailedError',
    'AssertionFailure',
    'AssertionOutcome',
    'Failed',
    'MessageSource',
    'MessageSupplier',
    'Success',
    'ValueProducer',
    'VouchConfig',
    'assert_does_not_raise',
    'check_does_not_raise',
    'does_not_raise',
    'get_config',
    'init',
]
