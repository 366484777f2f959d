"""Tests for failure message formatting."""

import json

import pytest
from hypothesis import given
from vouch.messages import (
    SEPARATOR,
    UNEXPECTED_EXCEPTION,
    build_prefix,
    format_unexpected,
    null_safe_get,
    qualified_name,
)

from tests.strategies import messages


class TestConstants:
    """The literal texts golden-output tests depend on."""

    def test_separator(self):
        assert SEPARATOR == ' ==> '

    def test_unexpected_exception(self):
        assert UNEXPECTED_EXCEPTION == 'Unexpected exception thrown: '


class TestNullSafeGet:
    """Tests for null_safe_get."""

    def test_none(self):
        assert null_safe_get(None) is None

    def test_string(self):
        assert null_safe_get('message') == 'message'

    def test_supplier(self):
        assert null_safe_get(lambda: 'message') == 'message'

    def test_supplier_returning_none(self):
        assert null_safe_get(lambda: None) is None

    def test_supplier_returning_non_string(self):
        assert null_safe_get(lambda: 42) == '42'

    def test_other_object(self):
        assert null_safe_get(42) == '42'


class TestBuildPrefix:
    """Tests for build_prefix."""

    def test_message(self):
        assert build_prefix('Custom message') == 'Custom message ==> '

    @pytest.mark.parametrize('message', [None, '', ' ', '\t\n'])
    def test_blank(self, message):
        assert build_prefix(message) == ''

    @given(messages)
    def test_prefix_ends_with_separator(self, message):
        assert build_prefix(message) == message + SEPARATOR


class TestQualifiedName:
    """Tests for qualified_name."""

    def test_builtin(self):
        assert qualified_name(OSError) == 'OSError'

    def test_stdlib(self):
        assert qualified_name(json.JSONDecodeError) == 'json.decoder.JSONDecodeError'

    def test_nested(self):
        class Outer:
            class Inner(Exception):
                pass

        assert qualified_name(Outer.Inner) == f'{__name__}.{Outer.Inner.__qualname__}'


class TestFormatUnexpected:
    """Tests for format_unexpected."""

    def test_without_message(self):
        assert format_unexpected(RuntimeError('x')) == 'Unexpected exception thrown: RuntimeError'

    def test_with_message(self):
        result = format_unexpected(RuntimeError('x'), 'Custom message')
        assert result == 'Custom message ==> Unexpected exception thrown: RuntimeError'

    def test_with_supplier(self):
        result = format_unexpected(RuntimeError('x'), lambda: 'Custom message')
        assert result == 'Custom message ==> Unexpected exception thrown: RuntimeError'
