"""Expected-exception register.

A test declares the exception it expects before its body runs; the harness
compares that declaration against whatever the body actually raised.

Harnesses should create one :class:`ExpectationContext` per test invocation.
The module-level functions operate on a default register for harnesses that
rely on a single global slot. That slot is never cleared automatically:
callers reset it with ``set_expected(None)`` between tests.
"""

from __future__ import annotations

import logging
import threading
from typing import Literal

from plainassert.assertions.base import ExceptionDescriptor

logger = logging.getLogger(__name__)

RegisterScope = Literal["process", "thread"]
_SCOPES = ("process", "thread")


def _to_descriptor(
    exc: BaseException | ExceptionDescriptor | None,
) -> ExceptionDescriptor | None:
    if exc is None:
        return None
    return ExceptionDescriptor.coerce(exc)


class ExpectationContext:
    """Holds at most one expected exception for a single test invocation."""

    def __init__(self, expected: BaseException | ExceptionDescriptor | None = None) -> None:
        self._expected = _to_descriptor(expected)

    @property
    def expected(self) -> ExceptionDescriptor | None:
        return self._expected

    @expected.setter
    def expected(self, value: BaseException | ExceptionDescriptor | None) -> None:
        self._expected = _to_descriptor(value)

    @property
    def is_set(self) -> bool:
        return self._expected is not None

    def expect(self, exc: BaseException | ExceptionDescriptor | None) -> None:
        """Overwrite the expected exception. No stacking, no queueing."""
        self.expected = exc
        logger.debug(f"Expecting exception: {self._expected}")

    def matches(self, caught: BaseException | ExceptionDescriptor) -> bool:
        """Return True if ``caught`` has the expected kind and message."""
        if self._expected is None:
            return False
        return self._expected == ExceptionDescriptor.coerce(caught)

    def __repr__(self) -> str:
        return f"ExpectationContext(expected={self._expected!r})"


_scope: RegisterScope = "process"
_process_context = ExpectationContext()
_thread_state = threading.local()


def use_scope(scope: RegisterScope) -> None:
    """Select whether the default register is shared process-wide or per thread."""
    global _scope
    if scope not in _SCOPES:
        raise ValueError(f"Unknown register scope: '{scope}'")
    _scope = scope
    logger.debug(f"Default register scope set to {scope}")


def current_scope() -> RegisterScope:
    return _scope


def default_context() -> ExpectationContext:
    """Return the register that the module-level functions operate on."""
    if _scope == "thread":
        context = getattr(_thread_state, "context", None)
        if context is None:
            context = ExpectationContext()
            _thread_state.context = context
        return context
    return _process_context


def set_expected(exc: BaseException | ExceptionDescriptor | None) -> None:
    default_context().expect(exc)


def expect_exception(exc: BaseException | ExceptionDescriptor | None) -> None:
    """Declare the exception the current test expects to be raised."""
    default_context().expect(exc)


def get_expected() -> ExceptionDescriptor | None:
    return default_context().expected
