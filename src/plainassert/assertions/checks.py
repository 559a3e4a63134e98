"""Boolean, null and equality checks.

Every check returns ``None`` when its condition holds and raises a single
:class:`AssertionFailure` when it does not. Passing ``msg`` replaces the
default failure message verbatim.
"""

from __future__ import annotations

import logging
from typing import Any

from plainassert.assertions.base import AssertionFailure, ExceptionDescriptor, ValueKind

logger = logging.getLogger(__name__)


def _fail(message: str) -> None:
    logger.debug(f"Assertion failed: {message}")
    raise AssertionFailure(message)


def _render(value: Any) -> str:
    # A null reference concatenates as nothing.
    if value is None:
        return ""
    return str(value)


def classify(value: Any) -> ValueKind:
    """Return the equality kind used when ``value`` is the wanted side."""
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (BaseException, ExceptionDescriptor)):
        return ValueKind.EXCEPTION
    return ValueKind.OBJECT


def exceptions_equal(
    wanted: BaseException | ExceptionDescriptor, got: Any
) -> bool:
    """Compare two exceptions on concrete kind and message text only."""
    if not isinstance(got, (BaseException, ExceptionDescriptor)):
        return False
    wanted_desc = ExceptionDescriptor.coerce(wanted)
    got_desc = ExceptionDescriptor.coerce(got)
    if wanted_desc.kind is not got_desc.kind:
        return False
    return wanted_desc.message == got_desc.message


def values_equal(wanted: Any, got: Any) -> bool:
    """Apply the equality rule for the kind of ``wanted``.

    Floats are compared exactly, with no tolerance: ``0.1 + 0.2`` does not
    equal ``0.3``. Callers needing a tolerance should compare ranges with
    ``<`` and ``>`` themselves. Objects use their own ``__eq__``, which is
    identity unless the class defines otherwise. An ``__eq__`` whose result
    has no truth value (array-likes) falls back to identity.
    """
    kind = classify(wanted)
    if kind == ValueKind.EXCEPTION:
        return exceptions_equal(wanted, got)
    if kind == ValueKind.OBJECT and wanted is got:
        return True
    result = wanted == got
    if isinstance(result, bool):
        return result
    try:
        return bool(result)
    except (TypeError, ValueError):
        return False


def default_equal_message(wanted: Any, got: Any) -> str:
    if classify(wanted) == ValueKind.EXCEPTION:
        got_text = (
            str(ExceptionDescriptor.coerce(got))
            if isinstance(got, (BaseException, ExceptionDescriptor))
            else _render(got)
        )
        return (
            "Exceptions do not match.\n"
            f"\tExpected {ExceptionDescriptor.coerce(wanted)},\n"
            f"\tGot {got_text}"
        )
    return f"Expected {_render(wanted)}, Got {_render(got)}"


def assert_true(boolean: Any, msg: str | None = None) -> None:
    """Fail unless ``boolean`` is true."""
    if not boolean:
        _fail(msg if msg is not None else "Expected True, got False.")


def assert_false(boolean: Any, msg: str | None = None) -> None:
    """Fail unless ``boolean`` is false."""
    if boolean:
        _fail(msg if msg is not None else "Expected False, got True.")


def assert_null(obj: Any, msg: str | None = None) -> None:
    """Fail unless ``obj`` is ``None``."""
    if obj is not None:
        _fail(msg if msg is not None else f"Expected Null object, got {_render(obj)}")


def assert_not_null(obj: Any, msg: str | None = None) -> None:
    """Fail if ``obj`` is ``None``."""
    if obj is None:
        _fail(msg if msg is not None else "The object is null.")


def assert_equal(wanted: Any, got: Any, msg: str | None = None) -> None:
    """Fail unless ``got`` equals ``wanted`` under the rule for wanted's kind.

    Supported kinds: integers, floats, booleans, strings, exceptions (or
    :class:`ExceptionDescriptor`) and arbitrary objects. Exceptions match when
    their concrete class and message are identical; nothing else about them
    is compared.
    """
    if values_equal(wanted, got):
        return
    _fail(msg if msg is not None else default_equal_message(wanted, got))
