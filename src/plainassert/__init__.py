"""Assertion checks and an expected-exception register for test code."""

from plainassert.assertions import (
    AssertionFailure,
    ExceptionDescriptor,
    ValueKind,
    assert_equal,
    assert_false,
    assert_not_null,
    assert_null,
    assert_true,
)
from plainassert.expected import (
    ExpectationContext,
    default_context,
    expect_exception,
    get_expected,
    set_expected,
    use_scope,
)
from plainassert.config import PlainAssertConfig, apply_config, load_config
from plainassert.verbose import setup_logger

__all__ = [
    "AssertionFailure",
    "ExceptionDescriptor",
    "ExpectationContext",
    "PlainAssertConfig",
    "ValueKind",
    "apply_config",
    "assert_equal",
    "assert_false",
    "assert_not_null",
    "assert_null",
    "assert_true",
    "default_context",
    "expect_exception",
    "get_expected",
    "load_config",
    "set_expected",
    "setup_logger",
    "use_scope",
]
