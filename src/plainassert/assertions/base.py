"""Base data structures for the assertion system."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AssertionFailure(AssertionError):
    """Raised when a checked expectation does not hold.

    Subclasses ``AssertionError`` so that any Python test runner reports it
    as a failed test rather than an errored one.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self._message = message

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message


class ValueKind(str, Enum):
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    STRING = "string"
    EXCEPTION = "exception"
    OBJECT = "object"


@dataclass(frozen=True)
class ExceptionDescriptor:
    """Identity of an exception for equality checks.

    Attributes:
        kind: Concrete exception class (subclasses are not equal to their base).
        message: Exception message text, ``str(exc)`` for a raised exception.

    Tracebacks, causes, context and extra attributes are not part of the
    identity.
    """

    kind: type[BaseException]
    message: str = ""

    def __post_init__(self) -> None:
        if not (isinstance(self.kind, type) and issubclass(self.kind, BaseException)):
            raise TypeError(
                f"ExceptionDescriptor kind must be an exception class, got {self.kind!r}"
            )

    @classmethod
    def from_exception(cls, exc: BaseException) -> ExceptionDescriptor:
        return cls(kind=type(exc), message=str(exc))

    @classmethod
    def coerce(cls, value: BaseException | ExceptionDescriptor) -> ExceptionDescriptor:
        if isinstance(value, ExceptionDescriptor):
            return value
        if isinstance(value, BaseException):
            return cls.from_exception(value)
        raise TypeError(
            f"Expected an exception or ExceptionDescriptor, got {type(value).__name__}"
        )

    def __str__(self) -> str:
        if not self.message:
            return self.kind.__name__
        return f"{self.kind.__name__}: {self.message}"
