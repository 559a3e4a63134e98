"""Assertion system for checking expected-vs-actual values."""

from plainassert.assertions.base import AssertionFailure, ExceptionDescriptor, ValueKind
from plainassert.assertions.checks import (
    assert_equal,
    assert_false,
    assert_not_null,
    assert_null,
    assert_true,
)

__all__ = [
    "AssertionFailure",
    "ExceptionDescriptor",
    "ValueKind",
    "assert_equal",
    "assert_false",
    "assert_not_null",
    "assert_null",
    "assert_true",
]
